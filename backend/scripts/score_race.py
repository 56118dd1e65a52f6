#!/usr/bin/env python3
"""CLI script for scoring one selection against one race result.

Usage:
    # Score a scenario file, cards as stored
    python backend/scripts/score_race.py --scenario backend/scripts/scenarios/monaco_2026.yaml

    # Validate and activate the cards first (draws Mystery/Random once)
    python backend/scripts/score_race.py --scenario backend/scripts/scenarios/monaco_2026.yaml \
        --activate --seed 7

Scenario format (YAML):
    league_id: L1
    user_id: u1
    race: {season, round, is_sprint_weekend, results: [...], sprint_results: [...], team_results: [...]}
    selection: {main_driver, reserve_driver, team}
    cards: {driver_card, team_card, target_player, target_driver, target_team,
            mystery_transformed_card, random_transformed_card}   # card names
    other_selections: [{user_id, main_driver, reserve_driver, team}, ...]
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

import yaml

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

sys.path.insert(0, str(Path(__file__).parent.parent))

from fantasy_f1.config import settings
from fantasy_f1.features.cards import CardActivationService, CardCatalog, CardError, RaceCardSelection
from fantasy_f1.features.races import (
    InMemoryRaceResultRepository,
    InMemorySelectionRepository,
    RaceResult,
    Selection,
)
from fantasy_f1.features.roster import RosterCatalog
from fantasy_f1.features.scoring import RosterAutoAssigner, ScoringContext, build_scoring_service
from fantasy_f1.shared.constants import CardType

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
    ],
)
logger = logging.getLogger(__name__)


def load_scenario(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def card_by_name(catalog: CardCatalog, card_type: CardType, name: str | None):
    if not name:
        return None
    card = catalog.get(card_type, name)
    if card is None:
        raise SystemExit(f"Unknown {card_type.value} card: {name}")
    return card


def build_card_selection(
    catalog: CardCatalog,
    cards: dict,
    race: RaceResult,
    activate: bool,
    rng: random.Random,
) -> RaceCardSelection | None:
    """Card selection from the scenario's card names."""
    if not cards:
        return None

    driver_card = card_by_name(catalog, CardType.DRIVER, cards.get("driver_card"))
    team_card = card_by_name(catalog, CardType.TEAM, cards.get("team_card"))
    targets = {
        "target_player": cards.get("target_player"),
        "target_driver": cards.get("target_driver"),
        "target_team": cards.get("target_team"),
    }

    if activate:
        service = CardActivationService(catalog, rng=rng)
        return service.activate(
            season=race.season,
            is_sprint_weekend=race.is_sprint_weekend,
            driver_card=driver_card,
            team_card=team_card,
            **targets,
        )

    return RaceCardSelection(
        driver_card=driver_card,
        team_card=team_card,
        mystery_transformed_card=card_by_name(
            catalog, CardType.DRIVER, cards.get("mystery_transformed_card")
        ),
        random_transformed_card=card_by_name(
            catalog, CardType.TEAM, cards.get("random_transformed_card")
        ),
        **targets,
    )


def main():
    parser = argparse.ArgumentParser(description="Score a selection against a race result")
    parser.add_argument("--scenario", required=True, type=Path, help="Scenario YAML file")
    parser.add_argument("--activate", action="store_true",
                        help="Validate and activate cards before scoring")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for Mystery/Random draws")
    args = parser.parse_args()

    scenario = load_scenario(args.scenario)
    league_id = scenario.get("league_id")
    user_id = scenario.get("user_id", "me")
    rng = random.Random(args.seed)

    race = RaceResult.from_dict(scenario["race"])
    selection = Selection.from_dict({
        **scenario["selection"],
        "round": race.round,
        "league_id": league_id,
        "user_id": user_id,
    })

    selections = InMemorySelectionRepository([selection])
    for other in scenario.get("other_selections") or []:
        selections.save(Selection.from_dict({**other, "round": race.round, "league_id": league_id}))
    race_results = InMemoryRaceResultRepository([race])

    roster_catalog = RosterCatalog(settings.content_dir)
    card_catalog = CardCatalog(settings.content_dir)

    try:
        cards = build_card_selection(card_catalog, scenario.get("cards") or {}, race, args.activate, rng)
    except CardError as e:
        print(f"Card activation failed: {e}", file=sys.stderr)
        sys.exit(1)

    service = build_scoring_service(
        roster_catalog,
        card_catalog,
        selections,
        race_results,
        auto_assigner=RosterAutoAssigner(roster_catalog, selections),
        rng=rng,
    )
    score = service.calculate_race_points(
        selection, race, cards, ScoringContext(league_id=league_id, user_id=user_id)
    )

    output = score.to_dict()
    if cards is not None:
        output["cards"] = cards.to_dict()
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
