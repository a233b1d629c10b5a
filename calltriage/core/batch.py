import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from tqdm import tqdm

from . import config
from .callstore import CallStore
from .classifier import classify, error_result
from .models import Call, ClassificationResult, Transcript
from .report import build_report
from .resolver import Thresholds
from .rules import RuleSet, default_rules

logger = logging.getLogger(__name__)

@dataclass
class BatchRun:
    results: List[ClassificationResult]
    report: Dict[str, Any]
    store: CallStore
    ruleset_version: str

def classify_store(store: CallStore, ruleset: RuleSet, thresholds: Thresholds = None,
                   workers: int = 1, progress: bool = False) -> List[ClassificationResult]:
    """Classify every call in ``store``; results keep the store's order."""
    pairs = list(store)

    def _one(pair: Tuple[Call, Transcript]) -> ClassificationResult:
        call, transcript = pair
        try:
            return classify(call, transcript, ruleset, thresholds)
        except Exception as e:
            logger.exception("failed to classify call %s", call.call_id)
            return error_result(call.call_id, e, ruleset.version)

    bar = dict(total=len(pairs), desc="Classifying", unit="call", disable=not progress)
    if workers <= 1 or len(pairs) < 2:
        return [_one(p) for p in tqdm(pairs, **bar)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(tqdm(pool.map(_one, pairs), **bar))

def run_batch(records: Iterable[Any], ruleset: RuleSet = None, workers: int = None,
              progress: bool = False, thresholds: Thresholds = None) -> BatchRun:
    if ruleset is None:
        ruleset = default_rules()
    workers = config.BATCH_WORKERS if workers is None else workers
    store = CallStore.from_records(records)
    if store.duplicates:
        logger.warning("%d record(s) skipped for duplicate call ids", store.duplicates)
    logger.info("classifying %d call(s) with rules %s (%d worker(s))", len(store), ruleset.version, workers)
    results = classify_store(store, ruleset, thresholds, workers=workers, progress=progress)
    report = build_report(results, store)
    report["ruleset_version"] = ruleset.version
    return BatchRun(results=results, report=report, store=store, ruleset_version=ruleset.version)
