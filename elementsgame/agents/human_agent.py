"""Human agent - renders the table and reads actions from the terminal."""

from elementsgame.engine import (
    PLAIN_COLORS,
    PLAIN_SHAPES,
    Action,
    PlayerView,
    PlayCard,
    DrawCards,
    EndTurn,
    ResolveElements,
)


def render_view(player_view: PlayerView) -> str:
    """Format what the current player sees as text."""
    top = player_view.top_discard
    lines = [
        f"--- {player_view.label} ({len(player_view.my_hand)} cards) ---",
        f"Top discard: {top if top is not None else 'none'}",
    ]
    if player_view.notice:
        lines.append(player_view.notice)
    if player_view.locked_color is not None or player_view.locked_shape is not None:
        locked = [
            v.value
            for v in (player_view.locked_color, player_view.locked_shape)
            if v is not None
        ]
        lines.append(f"Locked this turn: {' '.join(locked)}")
    lines.append(f"Deck: {player_view.deck_size} cards")
    for i, count in enumerate(player_view.num_cards_per_player):
        if i != player_view.current_player:
            warning = " (!)" if count == 1 else ""
            lines.append(f"  P{i + 1}: {count} cards{warning}")
    lines.append("Your hand: " + " ".join(str(c) for c in player_view.my_hand))
    return "\n".join(lines)


def describe_action(action: Action, player_view: PlayerView) -> str:
    if isinstance(action, PlayCard):
        return f"PLAY {player_view.my_hand[action.index]}"
    if isinstance(action, DrawCards):
        return "DRAW 3 (reverses direction)"
    if isinstance(action, EndTurn):
        return "END TURN"
    return f"CHOOSE {action.color.value} {action.shape.value}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        if not legal_actions:
            return None

        print()
        print(render_view(player_view))

        if player_view.pending_choice:
            return self._choose_elements(legal_actions)

        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a, player_view)}")
        return legal_actions[self._read_index(len(legal_actions))]

    def _choose_elements(self, legal_actions: list[Action]) -> Action:
        print("\nChoose a color:")
        for i, color in enumerate(PLAIN_COLORS):
            print(f"  {i}: {color.value}")
        color = PLAIN_COLORS[self._read_index(len(PLAIN_COLORS))]
        print("Choose a shape:")
        for i, shape in enumerate(PLAIN_SHAPES):
            print(f"  {i}: {shape.value}")
        shape = PLAIN_SHAPES[self._read_index(len(PLAIN_SHAPES))]
        choice = ResolveElements(color=color, shape=shape)
        return choice if choice in legal_actions else legal_actions[0]

    @staticmethod
    def _read_index(count: int) -> int:
        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < count:
                    return idx
            except ValueError:
                pass
            print("Invalid. Try again.")
