"""Command-line interface for drawing and evaluating destiny hands."""
import logging
import random

import click

from destiny_deck.config import get_config, get_default_rng, reset_default_rng
from destiny_deck.core.card import Card, parse_cards
from destiny_deck.core.deck import draw_cards, shuffle_deck
from destiny_deck.core.errors import DeckError
from destiny_deck.display import format_evaluation, format_hand
from destiny_deck.evaluation.evaluator import evaluate_hand, rank_hands
from destiny_deck.evaluation.constants import HAND_SIZE
from destiny_deck.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option('--config', default=None, help='Configuration to use')
@click.option('--log-level', default=None, help='Override the configured log level')
def cli(config, log_level):
    """Destiny deck hand engine CLI."""
    setup_logging(log_level, config)
    if config is not None:
        reset_default_rng(get_config(config).SEED)


@cli.command()
@click.option('--seed', type=int, default=None, help='Seed for a reproducible shuffle')
@click.option('--count', type=click.IntRange(min=0), default=HAND_SIZE, show_default=True, help='Cards to draw')
def draw(seed, count):
    """Shuffle a fresh deck and draw cards from it."""
    rng = random.Random(seed) if seed is not None else get_default_rng()
    try:
        drawn, remaining = draw_cards(shuffle_deck(rng=rng), count)
    except DeckError as e:
        raise click.BadParameter(str(e), param_hint='--count')

    if len(drawn) == HAND_SIZE:
        click.echo(format_evaluation(evaluate_hand(drawn)))
    else:
        click.echo(format_hand(drawn))
    click.echo(f"{len(remaining)} cards remaining")


def _parse_hand(value: str) -> list[Card]:
    try:
        return parse_cards(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@cli.command()
@click.argument('cards', nargs=-1, required=True)
def evaluate(cards):
    """Evaluate a five-card hand given as card codes, e.g. As Ks Qs Js Ts."""
    hand = _parse_hand(' '.join(cards))
    try:
        evaluation = evaluate_hand(hand)
    except DeckError as e:
        raise click.BadParameter(str(e), param_hint='CARDS')
    click.echo(format_evaluation(evaluation))


@cli.command()
@click.option('--hand', 'hands', multiple=True, required=True,
              help='Hand as space separated card codes; repeat for each hand')
def compare(hands):
    """Evaluate several hands and list them strongest first."""
    evaluations = []
    for value in hands:
        try:
            evaluations.append(evaluate_hand(_parse_hand(value)))
        except DeckError as e:
            raise click.BadParameter(str(e), param_hint='--hand')

    ranked = rank_hands(evaluations)
    best_score = ranked[0].score
    for evaluation in ranked:
        marker = '*' if evaluation.score == best_score else ' '
        click.echo(f"{marker} {format_evaluation(evaluation)}")
    logger.info(f"Compared {len(ranked)} hands, best score {best_score}")


if __name__ == '__main__':
    cli()
