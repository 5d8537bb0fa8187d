"""Deck creation and shuffling."""

import random
from typing import List, Optional

from elementsgame.engine.card import PLAIN_COLORS, PLAIN_SHAPES, Card, CardType, Color, Shape

COPIES_PER_REGULAR = 4
ELEMENTS_COUNT = 8
DECK_SIZE = (
    len(PLAIN_COLORS) * len(PLAIN_SHAPES) * COPIES_PER_REGULAR
    + len(PLAIN_COLORS)
    + len(PLAIN_SHAPES)
    + ELEMENTS_COUNT
)


def create_deck(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Card]:
    """Create the 80-card Elements deck, shuffled.

    - 4 colors × 4 shapes × 4 copies: 64 Regular cards
    - 4 color-only + 4 shape-only: 8 Single cards
    - 8 Elements cards
    - Total: 80 cards

    ``rng`` wins over ``seed`` when both are given.
    """
    cards: List[Card] = []

    for color in PLAIN_COLORS:
        for shape in PLAIN_SHAPES:
            for _ in range(COPIES_PER_REGULAR):
                cards.append(Card(type=CardType.REGULAR, color=color, shape=shape))

    for color in PLAIN_COLORS:
        cards.append(Card(type=CardType.SINGLE, color=color, shape=Shape.NONE))
    for shape in PLAIN_SHAPES:
        cards.append(Card(type=CardType.SINGLE, color=Color.NONE, shape=shape))

    for _ in range(ELEMENTS_COUNT):
        cards.append(Card(type=CardType.ELEMENTS, color=Color.WILD, shape=Shape.WILD))

    if rng is None:
        rng = random.Random(seed)
    rng.shuffle(cards)

    return cards
