from .aggregator import find_best_odds, find_best_sources
from .arbitrage import evaluate_event, find_arbitrage_opportunities
from .reporting import (
    ReportSink,
    LogReporter,
    ConsoleReporter,
    JsonReporter,
    make_reporter,
    report_opportunities,
    format_opportunity,
    format_opportunity_short,
    format_opportunity_json,
    format_opportunities_table,
    generate_disclaimer,
)
from .scanner import ArbitrageScanner, run_scan

__all__ = [
    "find_best_odds",
    "find_best_sources",
    "evaluate_event",
    "find_arbitrage_opportunities",
    "ReportSink",
    "LogReporter",
    "ConsoleReporter",
    "JsonReporter",
    "make_reporter",
    "report_opportunities",
    "format_opportunity",
    "format_opportunity_short",
    "format_opportunity_json",
    "format_opportunities_table",
    "generate_disclaimer",
    "ArbitrageScanner",
    "run_scan",
]
