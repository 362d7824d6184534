"""Stamp analysis constants"""

from .stamp_master_list import (
    OFFICIAL_STAMP_MASTER_LIST,
    OfficialStamp,
    match_stamp,
    get_master_stamp_list,
)

__all__ = [
    'OFFICIAL_STAMP_MASTER_LIST',
    'OfficialStamp',
    'match_stamp',
    'get_master_stamp_list',
]
