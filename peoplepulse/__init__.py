"""
People Pulse - Composite Political Sentiment Scoring

Exposes the scoring entry points:
- People Pulse Index (PPI)
- Corruption sentiment index
- Election seat simulation
- Diaspora narrative-flow detection
- Albanian political ontology and coalition search

Entry points are imported lazily so that pandas and numpy are only loaded
when a calculator is actually used.
"""

__version__ = "0.1.0"


def __getattr__(name):
    """Lazy import of the scoring submodules."""
    if name in ("PPICalculator", "PPIResult", "compute_ppi"):
        from .scoring.ppi import PPICalculator, PPIResult, compute_ppi
        globals()["PPICalculator"] = PPICalculator
        globals()["PPIResult"] = PPIResult
        globals()["compute_ppi"] = compute_ppi
        return globals()[name]
    if name in ("CorruptionSentimentEngine", "compute_corruption_sentiment", "add_corruption_case", "sector_risk"):
        from .corruption.engine import (
            CorruptionSentimentEngine,
            add_corruption_case,
            compute_corruption_sentiment,
            sector_risk,
        )
        globals()["CorruptionSentimentEngine"] = CorruptionSentimentEngine
        globals()["compute_corruption_sentiment"] = compute_corruption_sentiment
        globals()["add_corruption_case"] = add_corruption_case
        globals()["sector_risk"] = sector_risk
        return globals()[name]
    if name in ("ElectionSimulator", "run_election_simulation"):
        from .election.simulator import ElectionSimulator, run_election_simulation
        globals()["ElectionSimulator"] = ElectionSimulator
        globals()["run_election_simulation"] = run_election_simulation
        return globals()[name]
    if name in ("DiasporaTracker", "detect_narrative_flows"):
        from .diaspora.tracker import DiasporaTracker, detect_narrative_flows
        globals()["DiasporaTracker"] = DiasporaTracker
        globals()["detect_narrative_flows"] = detect_narrative_flows
        return globals()[name]
    if name == "PoliticalOntology":
        from .ontology.landscape import PoliticalOntology
        globals()["PoliticalOntology"] = PoliticalOntology
        return PoliticalOntology
    raise AttributeError(f"module 'peoplepulse' has no attribute {name!r}")


__all__ = [
    "PPICalculator",
    "PPIResult",
    "compute_ppi",
    "CorruptionSentimentEngine",
    "compute_corruption_sentiment",
    "add_corruption_case",
    "sector_risk",
    "ElectionSimulator",
    "run_election_simulation",
    "DiasporaTracker",
    "detect_narrative_flows",
    "PoliticalOntology",
]
