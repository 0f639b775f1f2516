"""In-process counters and latency histograms.

No external dependencies. Series are keyed by metric name plus a sorted
tuple of label pairs.
"""

from typing import Any, Dict, List, Optional, Tuple
import threading


LabelKey = Tuple[Tuple[str, str], ...]

LATENCY_BINS_MS: List[int] = [25, 50, 100, 250, 500, 1000, 2500, 5000, 12000]

_lock = threading.Lock()
_counters: Dict[Tuple[str, LabelKey], int] = {}
# name -> labels -> {"counts": [...], "sum_ms": float}
_timings: Dict[str, Dict[LabelKey, Dict[str, Any]]] = {}


def _label_key(labels: Optional[Dict[str, str]]) -> LabelKey:
    if not labels:
        return ()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


def _bin_index(value_ms: float) -> int:
    for i, upper in enumerate(LATENCY_BINS_MS):
        if value_ms <= upper:
            return i
    return len(LATENCY_BINS_MS)


def inc_counter(metric: str, labels: Optional[Dict[str, str]] = None) -> None:
    key = (metric, _label_key(labels))
    with _lock:
        _counters[key] = _counters.get(key, 0) + 1


def record_timing(metric: str, value_ms: Optional[float], labels: Optional[Dict[str, str]] = None) -> None:
    if value_ms is None:
        return
    lk = _label_key(labels)
    with _lock:
        series = _timings.setdefault(metric, {})
        entry = series.get(lk)
        if entry is None:
            entry = {"counts": [0] * (len(LATENCY_BINS_MS) + 1), "sum_ms": 0.0}
            series[lk] = entry
        entry["counts"][_bin_index(value_ms)] += 1
        entry["sum_ms"] += float(value_ms)


def get_counter(metric: str, labels: Optional[Dict[str, str]] = None) -> int:
    with _lock:
        return _counters.get((metric, _label_key(labels)), 0)


def get_metrics_snapshot() -> Dict[str, Any]:
    with _lock:
        counters = [
            {"name": name, "labels": dict(lk), "value": value}
            for (name, lk), value in _counters.items()
        ]
        histograms = [
            {
                "name": name,
                "labels": dict(lk),
                "bins_ms": list(LATENCY_BINS_MS),
                "counts": list(entry["counts"]),
                "sum_ms": entry["sum_ms"],
            }
            for name, series in _timings.items()
            for lk, entry in series.items()
        ]
    return {"counters": counters, "histograms": histograms}


def reset_metrics() -> None:
    with _lock:
        _counters.clear()
        _timings.clear()
