#!/usr/bin/env python
"""
People Pulse CLI - Command Line Interface

Usage:
    python -m peoplepulse.cli ppi --file factors.json --previous 61.5
    python -m peoplepulse.cli ppi --factor inflationRate=2.4 --factor outputGap=-1.8
    python -m peoplepulse.cli corruption --json
    python -m peoplepulse.cli sector-risk Healthcare
    python -m peoplepulse.cli simulate --scenario "Economic Crisis" --seed 7
    python -m peoplepulse.cli diaspora --seed 3
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

from peoplepulse.config import get_settings
from peoplepulse.logging_config import get_logger, setup_logging

logger = get_logger("peoplepulse.cli")

# Reference reading used when no factors are given
SAMPLE_FACTORS = {
    "outputGap": -1.8,
    "unemploymentRate": 11.2,
    "inflationRate": 2.4,
    "gdpGrowthRate": 3.2,
    "mediaConfidence": 62,
    "socialMediaSentiment": 58,
    "pollApproval": 55,
    "corruptionIndex": 38,
    "safetyIndex": 72,
    "healthcareAccess": 65,
    "policyEffectiveness": 58,
    "transparencyScore": 52,
}


def _banner(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"People Pulse - {title}")
    print(f"{'='*60}\n")


def _dump(payload) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _parse_factor_pairs(pairs: List[str]) -> Dict[str, float]:
    factors = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        factors[name.strip()] = float(value)
    return factors


def cmd_ppi(args):
    """Compute the People Pulse Index."""
    from peoplepulse.scoring.ppi import PPICalculator

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            factors = json.load(f)
    else:
        factors = dict(SAMPLE_FACTORS)
    try:
        factors.update(_parse_factor_pairs(args.factor or []))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    result = PPICalculator().calculate(factors, previous_index=args.previous)

    if args.json:
        _dump(result.to_dict())
        return 0

    _banner("People Pulse Index")
    print(f"Index:      {result.index:.1f} [{result.category.value}]")
    print(f"Trend:      {result.trend.value}")
    print(f"Confidence: {result.confidence}%")
    print("\nComponents:")
    for name, score in result.components.items():
        shown = "n/a" if score is None else f"{score:.1f}"
        print(f"  {name.capitalize():<12} {shown}")
    return 0


def cmd_corruption(args):
    """Show the corruption sentiment snapshot."""
    from peoplepulse.corruption.engine import CorruptionSentimentEngine

    sentiment = CorruptionSentimentEngine().get_sentiment()

    if args.json:
        _dump(sentiment.to_dict())
        return 0

    _banner("Corruption Sentiment")
    print(f"Overall index: {sentiment.overall} ({sentiment.public_mood})")
    if sentiment.international_ranking:
        r = sentiment.international_ranking
        print(f"International: {r.rank}/{r.total} ({r.source})")
    print("\nBy category:")
    for name, score in sentiment.by_category.items():
        print(f"  {name:<14} {score}")
    print("\nTop concerns:")
    for concern in sentiment.top_concerns:
        print(f"  - {concern}")
    return 0


def cmd_sector_risk(args):
    """Classify corruption risk for one sector."""
    from peoplepulse.corruption.engine import CorruptionSentimentEngine

    risk = CorruptionSentimentEngine().calculate_sector_risk(args.sector)

    if args.json:
        _dump(risk.to_dict())
        return 0

    _banner(f"Sector Risk: {args.sector}")
    print(f"Risk:  {risk.risk}")
    print(f"Score: {risk.score:.0f}")
    for factor in risk.factors:
        print(f"  - {factor}")
    return 0


def cmd_simulate(args):
    """Run an election simulation over the Serbian reference data."""
    import numpy as np

    from peoplepulse.election.reference import generate_scenarios
    from peoplepulse.election.simulator import ElectionSimulator

    scenarios = {s.name.casefold(): s for s in generate_scenarios()}
    scenario = scenarios.get(args.scenario.casefold())
    if scenario is None:
        print(f"Error: unknown scenario '{args.scenario}'")
        print(f"Available: {', '.join(s.name for s in generate_scenarios())}")
        return 1

    seed = get_settings().simulation_seed if args.seed is None else args.seed
    result = ElectionSimulator(rng=np.random.default_rng(seed)).simulate(scenario)

    if args.json:
        _dump(result.to_dict())
        return 0

    _banner(f"Election Simulation: {scenario.name}")
    print(f"Turnout:    {result.turnout:.1f}%")
    print(f"Winner:     {result.winner.name if result.winner else 'none'}")
    print(f"Confidence: {result.confidence:.0f}%")
    print("\nSeats:")
    for r in sorted(result.results, key=lambda r: (-r.seats, r.party.id)):
        print(f"  {r.party.id:<8} {r.percentage:5.1f}%  {r.seats:>4} seats ({r.change:+d})")
    if result.coalition_scenarios:
        print("\nCoalitions:")
        for c in result.coalition_scenarios:
            names = " + ".join(p.id for p in c.parties)
            print(f"  {names}: {c.total_seats} seats [{c.stability.value}]")
    print("\nUncertainty:")
    for factor in result.uncertainty_factors:
        print(f"  - {factor}")
    return 0


def cmd_diaspora(args):
    """Generate sample diaspora activity and report narrative flows."""
    import numpy as np

    from peoplepulse.diaspora.tracker import DiasporaTracker

    seed = get_settings().simulation_seed if args.seed is None else args.seed
    tracker = DiasporaTracker()
    posts = tracker.generate_sample_data(np.random.default_rng(seed))
    metrics = tracker.get_metrics(posts)

    if args.json:
        _dump(metrics.to_dict())
        return 0

    _banner("Diaspora Influence")
    print(f"Population:      {metrics.total_population:,}")
    print(f"Active users:    {metrics.active_users}")
    print(f"Influence index: {metrics.influence_index:.2f}")
    print(f"Top narratives:  {', '.join(metrics.top_narratives)}")
    print(f"\nNarrative flows into {tracker.homeland}: {len(metrics.cross_border_flows)}")
    for flow in sorted(metrics.cross_border_flows, key=lambda f: f.strength, reverse=True):
        print(f"  {flow.narrative:<16} from {flow.origin:<15} strength {flow.strength:.3f}")
    return 0


def cmd_coalitions(args):
    """List majority coalitions in the Albanian parliament."""
    from peoplepulse.ontology.landscape import PoliticalOntology

    threshold = get_settings().coalition_seat_threshold if args.threshold is None else args.threshold
    options = PoliticalOntology().coalition_possibilities(threshold)

    if args.json:
        _dump([o.to_dict() for o in options])
        return 0

    _banner(f"Coalitions reaching {threshold} seats")
    if not options:
        print("No coalition of two or three parties reaches the threshold.")
    for option in options:
        names = " + ".join(option.parties)
        print(f"  {names:<16} {option.seats:>4} seats  alignment {option.ideological_alignment:.2f}")
    return 0


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="People Pulse - Composite Political Sentiment Scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m peoplepulse.cli ppi --previous 61.5
  python -m peoplepulse.cli corruption --json
  python -m peoplepulse.cli sector-risk Healthcare
  python -m peoplepulse.cli simulate --scenario "Youth Mobilization"
  python -m peoplepulse.cli diaspora
  python -m peoplepulse.cli coalitions --threshold 71
        """
    )
    parser.add_argument("--log-level", default=None, help="Override PULSE_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # PPI command
    ppi_parser = subparsers.add_parser("ppi", help="Compute the People Pulse Index")
    ppi_parser.add_argument("--file", "-f", help="JSON file of factors")
    ppi_parser.add_argument("--factor", action="append", metavar="NAME=VALUE", help="Set one factor")
    ppi_parser.add_argument("--previous", "-p", type=float, default=None, help="Previous index for trend")
    ppi_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    ppi_parser.set_defaults(func=cmd_ppi)

    # Corruption command
    corruption_parser = subparsers.add_parser("corruption", help="Corruption sentiment snapshot")
    corruption_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    corruption_parser.set_defaults(func=cmd_corruption)

    # Sector risk command
    sector_parser = subparsers.add_parser("sector-risk", help="Corruption risk for a sector")
    sector_parser.add_argument("sector", help="Sector name, e.g. Healthcare")
    sector_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    sector_parser.set_defaults(func=cmd_sector_risk)

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run an election simulation")
    simulate_parser.add_argument("--scenario", "-s", default="Status Quo", help="Scenario name")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    simulate_parser.set_defaults(func=cmd_simulate)

    # Diaspora command
    diaspora_parser = subparsers.add_parser("diaspora", help="Diaspora metrics over sample data")
    diaspora_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    diaspora_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    diaspora_parser.set_defaults(func=cmd_diaspora)

    # Coalitions command
    coalitions_parser = subparsers.add_parser("coalitions", help="Majority coalitions from party stances")
    coalitions_parser.add_argument("--threshold", "-t", type=int, default=None, help="Seats needed")
    coalitions_parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    coalitions_parser.set_defaults(func=cmd_coalitions)

    args = parser.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
