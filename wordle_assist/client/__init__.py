from .session import WordleClient
from .harness import run_case, run_batch, choose_guess
from .io import summarize, format_summary, write_csv

__all__ = ["WordleClient", "run_case", "run_batch", "choose_guess",
           "summarize", "format_summary", "write_csv"]
