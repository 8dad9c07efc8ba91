from .errors import DegenerateLabels, InvalidInput, RankAucError
from .metrics import compute_auc
from .options import AucOptions
from .ranking import assign_average_ranks
from .report import AucReport, build_report, write_report
from .slices import sliced_auc
from .synthetic import ScoredDataset, generate_scored_dataset

__all__ = [
    "assign_average_ranks",
    "compute_auc",
    "AucOptions",
    "RankAucError",
    "InvalidInput",
    "DegenerateLabels",
    "sliced_auc",
    "ScoredDataset",
    "generate_scored_dataset",
    "AucReport",
    "build_report",
    "write_report",
]
