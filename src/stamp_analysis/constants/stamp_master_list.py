"""Official stamp master list and stamp-text matching"""
import re
from dataclasses import dataclass


@dataclass(frozen=True)
class OfficialStamp:
    """One entry of the official stamp master list"""
    id:       str
    name:     str
    keywords: tuple[str, ...]
    pattern:  re.Pattern


OFFICIAL_STAMP_MASTER_LIST: tuple[OfficialStamp, ...] = (
    OfficialStamp(
        id='stamp_1',
        name='OFFICER COMMANDING 14th BN A.P.S.P. ANANTHAPURAMU',
        keywords=('OFFICER COMMANDING', '14TH BN', 'A.P.S.P', 'ANANTHAPURAMU'),
        pattern=re.compile(r'OFFICER\s+COMMANDING.*14.*BN.*A\.P\.S\.P.*ANANTHAPURAMU', re.IGNORECASE),
    ),
    OfficialStamp(
        id='stamp_2',
        name='STATE OFFICER TO ADGP APSP HEAD OFFICE MANGALAGIRI',
        keywords=('STATE OFFICER', 'ADGP', 'APSP', 'HEAD OFFICE', 'MANGALAGIRI'),
        pattern=re.compile(r'STATE\s+OFFICER.*ADGP.*APSP.*HEAD\s+OFFICE.*MANGALAGIRI', re.IGNORECASE),
    ),
    OfficialStamp(
        id='stamp_3',
        name='Inspector General of Police APSP Bns, Amaravathi',
        keywords=('INSPECTOR GENERAL', 'POLICE', 'APSP', 'BNS', 'AMARAVATHI'),
        pattern=re.compile(r'INSPECTOR\s+GENERAL.*POLICE.*APSP.*BNS.*AMARAVATHI', re.IGNORECASE),
    ),
    OfficialStamp(
        id='stamp_4',
        name='Dy. Inspector General of Police-IV APSP Battalions, Mangalagiri',
        keywords=('DY', 'INSPECTOR GENERAL', 'POLICE', 'APSP', 'BATTALIONS', 'MANGALAGIRI'),
        pattern=re.compile(r'DY.*INSPECTOR\s+GENERAL.*POLICE.*APSP.*BATTALIONS.*MANGALAGIRI', re.IGNORECASE),
    ),
    OfficialStamp(
        id='stamp_5',
        name='Sd/- B. Sreenivasulu, IPS., Addl. Commissioner of Police, Vijayawada City',
        keywords=('SD', 'SREENIVASULU', 'IPS', 'COMMISSIONER', 'POLICE', 'VIJAYAWADA'),
        pattern=re.compile(r'SD.*SREENIVASULU.*IPS.*COMMISSIONER.*POLICE.*VIJAYAWADA', re.IGNORECASE),
    ),
    OfficialStamp(
        id='stamp_6',
        name='Dr. SHANKHABRATA BAGCHI IPS., Addl. Director General of Police, APSP Battalions',
        keywords=('SHANKHABRATA', 'BAGCHI', 'IPS', 'DIRECTOR GENERAL', 'POLICE', 'APSP', 'BATTALIONS'),
        pattern=re.compile(r'SHANKHABRATA.*BAGCHI.*IPS.*DIRECTOR\s+GENERAL.*POLICE.*APSP.*BATTALIONS', re.IGNORECASE),
    ),
)


def match_stamp(
        text: str,
        keyword_threshold: float = 0.6 ) -> OfficialStamp | None:

    """
    Resolve stamp text to an entry of the master list

    A full pattern match wins outright. Otherwise the entry with the
    largest share of its keywords present is returned, provided that
    share reaches keyword_threshold. Ties keep master-list order.
    """

    if not text or not text.strip():

        return None

    for stamp in OFFICIAL_STAMP_MASTER_LIST:
        if stamp.pattern.search(text):

            return stamp

    upper      = _normalise(text)
    best       = None
    best_score = 0.0

    for stamp in OFFICIAL_STAMP_MASTER_LIST:
        hits  = sum(1 for kw in stamp.keywords if re.search(rf'\b{re.escape(_normalise(kw))}\b', upper))
        score = hits / len(stamp.keywords)

        if score > best_score:
            best, best_score = stamp, score

    if best and best_score >= keyword_threshold:

        return best

    return None


def get_master_stamp_list() -> list[dict]:

    """Public view of the master list: id and name only"""

    return [{'id': stamp.id, 'name': stamp.name} for stamp in OFFICIAL_STAMP_MASTER_LIST]


def _normalise(value: str ) -> str:

    """Upper-case and collapse whitespace so OCR line breaks don't break keywords"""

    return re.sub(r'\s+', ' ', value).upper()
