from __future__ import annotations

from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'seed': 0,
        'cells_carved': 0,
        'backtracks': 0,
        'frontier_peak': 0,
        'forced_exit': False,
        'runtime_ms': 0.0,
    }
