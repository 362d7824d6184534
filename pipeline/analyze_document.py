"""Stamp/signature analysis run — writes the result JSON and a log file"""
import sys
import json
import logging
import argparse
from pathlib import Path

from dotenv import load_dotenv
import os

# Project root setup
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

load_dotenv(ROOT / '.env')

from stamp_analysis import AnalysisConfig, OCRService, StampSignatureAnalyzer, SimulatedTextReader

# ── Config ──────────────────────────────────────────────────────────────────
DEBUG_DIR   = ROOT / "debug"
LOG_FILE    = DEBUG_DIR / "stamp_analysis.log"
ANTHROPIC_KEY = os.getenv("ANTHROPIC_API_KEY")
OPENAI_KEY    = os.getenv("OPENAI_API_KEY")
# ────────────────────────────────────────────────────────────────────────────


def setup_logging() -> logging.Logger:

    """Configure file + console logging"""

    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("stamp_analysis")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    fmt       = logging.Formatter("[%(asctime)s] %(levelname)-8s %(message)s", datefmt="%H:%M:%S")
    file_h    = logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')
    console_h = logging.StreamHandler(sys.stdout)

    file_h.setFormatter(fmt)
    console_h.setFormatter(fmt)
    logger.addHandler(file_h)
    logger.addHandler(console_h)

    return logger


def build_text_reader(config: AnalysisConfig, simulate: bool, logger: logging.Logger):

    """Vision OCR when a key is configured, otherwise the simulated reader"""

    if not simulate and config.anthropic_api_key:
        from anthropic import Anthropic
        logger.info(f"Text reader: Anthropic ({config.ocr_model})")
        return OCRService(Anthropic(api_key=config.anthropic_api_key), model=config.ocr_model,
                          max_retries=config.max_retries)

    if not simulate and config.openai_api_key:
        from openai import OpenAI
        logger.info("Text reader: OpenAI")
        return OCRService(OpenAI(api_key=config.openai_api_key), max_retries=config.max_retries)

    logger.info("Text reader: SIMULATED")
    return SimulatedTextReader(seed=config.simulation_seed)


def main() -> int:

    parser = argparse.ArgumentParser(description="Analyse a document for stamps, signatures and dates")
    parser.add_argument("document", type=Path, help="Image or PDF to analyse")
    parser.add_argument("--user", default="local", help="User id for the audit trail")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the simulated collaborators")
    parser.add_argument("--simulate", action="store_true", help="Skip OCR even if an API key is set")
    parser.add_argument("--out", type=Path, default=None, help="Write the result JSON here")
    args = parser.parse_args()

    logger = setup_logging()
    config = AnalysisConfig(
        anthropic_api_key=ANTHROPIC_KEY or "",
        openai_api_key=OPENAI_KEY or "",
        simulation_seed=args.seed,
    )

    analyzer = StampSignatureAnalyzer(config, text_reader=build_text_reader(config, args.simulate, logger))
    result   = analyzer.analyze(args.document.read_bytes(), args.document.name, args.user, logger=logger)
    payload  = json.dumps(result.to_dict(), indent=2)

    if args.out:
        args.out.write_text(payload, encoding='utf-8')
        logger.info(f"Result written to {args.out}")
    else:
        print(payload)

    return 0 if result.stamp_validation == 'Y' else 1


if __name__ == "__main__":
    sys.exit(main())
