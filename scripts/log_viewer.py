#!/usr/bin/env python3
"""Replay a Gin Rummy JSONL game log in the terminal.

    python scripts/log_viewer.py logs/<file>.jsonl

n/p step forward and back, c plays the log at one step per second until a
key is pressed, r and t jump to a round or a turn of the current round, q
quits.
"""

import argparse
import curses
import json
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass
class ViewState:
    """Table as seen after one logged event."""

    round: int = 0
    turn: int = 0
    players: list[dict] = field(default_factory=list)
    hands: dict[str, str] = field(default_factory=dict)
    melds: dict[str, list[str]] = field(default_factory=dict)
    deadwood: dict[str, int] = field(default_factory=dict)
    scores: dict[str, int] = field(default_factory=dict)
    discard_top: str = ""
    stock: int = 0
    last_action: str = ""
    current_player: int = -1


def load_events(path: Path) -> list[dict]:
    """Read one JSON object per non-blank line."""
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


def build_states(events: list[dict]) -> list[ViewState]:
    """Fold events into one snapshot per displayable event."""
    states: list[ViewState] = []
    current = ViewState()

    for event in events:
        event_type = event.get("type")

        if event_type == "session_start":
            current = ViewState()
            current.players = event.get("players", [])
            current.scores = {str(p["id"]): 0 for p in current.players}
            current.last_action = f"Session started, first to {event.get('target_score')}"

        elif event_type == "round_start":
            current.round = event.get("round", 0)
            current.turn = 0
            current.hands = event.get("hands", {})
            current.melds = {}
            current.deadwood = {}
            current.discard_top = event.get("discard_top", "")
            current.stock = event.get("stock", 0)
            current.current_player = -1
            current.last_action = "Round dealt"

        elif event_type == "turn":
            player = event.get("player", 0)
            key = str(player)
            current.turn = event.get("turn", current.turn)
            current.hands = {**current.hands, key: event.get("hand", "")}
            current.melds = {**current.melds, key: event.get("melds", [])}
            current.deadwood = {**current.deadwood, key: event.get("deadwood", 0)}
            current.discard_top = event.get("discard_top", "")
            current.stock = event.get("stock", current.stock)
            current.current_player = player

            action = (
                f"Player {player} drew {event.get('drawn')} from "
                f"{event.get('draw_source')}, discarded {event.get('discarded')}"
            )
            if event.get("knocked"):
                action += " and KNOCKED"
            current.last_action = action

        elif event_type == "round_end":
            current.hands = event.get("hands", current.hands)
            current.scores = event.get("scores", current.scores)
            outcome = event.get("outcome", "")
            if outcome == "draw":
                current.last_action = "Round drawn (stock exhausted)"
            else:
                current.last_action = (
                    f"{outcome.upper()}: Player {event.get('knocker')} knocked, "
                    f"{event.get('points')} points awarded"
                )

        elif event_type == "session_end":
            current.scores = event.get("final_scores", current.scores)
            winner = event.get("winner")
            if winner is None:
                current.last_action = "Session ended in a tie"
            else:
                current.last_action = f"Session ended. Winner: Player {winner}"

        else:
            continue

        states.append(replace(
            current,
            players=list(current.players),
            hands=dict(current.hands),
            melds=dict(current.melds),
            deadwood=dict(current.deadwood),
            scores=dict(current.scores),
        ))

    return states


def render(state: ViewState, step: int, total: int) -> list[str]:
    """Render a state as screen lines."""
    rule = "-" * 72
    header = f"Round {state.round}  Turn {state.turn}"
    position = f"[{step + 1}/{total}]"
    lines = [
        "#" * 72,
        header.ljust(72 - len(position)) + position,
        "#" * 72,
        f"Stock: {state.stock:>2}   Discard: {state.discard_top or '--'}",
        f"> {state.last_action}",
        rule,
    ]

    names = {p.get("id"): p.get("name", f"Player {p.get('id')}") for p in state.players}
    for pid, name in names.items():
        key = str(pid)
        turn_marker = "*" if pid == state.current_player else " "
        lines.append(f"{turn_marker} {name} [{state.scores.get(key, 0)} pts]")
        lines.append(f"    hand     {state.hands.get(key, '')}")
        melds = state.melds.get(key)
        lines.append(f"    melds    {' | '.join(melds) if melds else '-'}")
        if key in state.deadwood:
            lines.append(f"    deadwood {state.deadwood[key]}")
        lines.append(rule)

    lines.append("n:next  p:prev  c:play  r:round  t:turn  q:quit")
    return lines


def first_index(states: list[ViewState], round_num: int, turn_num: int = 0) -> int | None:
    """Index of the first state at the given round and turn."""
    return next(
        (i for i, s in enumerate(states) if s.round == round_num and s.turn == turn_num),
        None,
    )


class LogViewer:
    """Curses front end stepping through replay states."""

    PLAYBACK_INTERVAL_MS = 1000

    def __init__(self, stdscr, states: list[ViewState]):
        self.screen = stdscr
        self.states = states
        self.step = 0
        self._keys = {
            ord("n"): self.next_step,
            ord("p"): self.prev_step,
            ord("c"): self.play,
            ord("r"): self.jump_round,
            ord("t"): self.jump_turn,
        }

    @property
    def state(self) -> ViewState:
        return self.states[self.step]

    def draw(self) -> None:
        height, width = self.screen.getmaxyx()
        self.screen.erase()
        lines = render(self.state, self.step, len(self.states))
        for row, text in enumerate(lines[: height - 1]):
            self.screen.addnstr(row, 0, text, max(width - 1, 1))
        self.screen.refresh()

    def next_step(self) -> None:
        self.step = min(self.step + 1, len(self.states) - 1)

    def prev_step(self) -> None:
        self.step = max(self.step - 1, 0)

    def play(self) -> None:
        """Advance automatically until the end or any key press."""
        self.screen.timeout(self.PLAYBACK_INTERVAL_MS)
        try:
            while self.step < len(self.states) - 1:
                self.next_step()
                self.draw()
                if self.screen.getch() != -1:
                    break
        finally:
            self.screen.timeout(-1)

    def ask_number(self, prompt: str) -> int | None:
        height, width = self.screen.getmaxyx()
        row = height - 1
        self.screen.move(row, 0)
        self.screen.clrtoeol()
        self.screen.addnstr(row, 0, prompt, max(width - 1, 1))
        curses.echo()
        curses.curs_set(1)
        try:
            raw = self.screen.getstr(row, len(prompt), 6)
        finally:
            curses.noecho()
            curses.curs_set(0)
        text = raw.decode("utf-8", errors="ignore").strip()
        return int(text) if text.isdigit() else None

    def jump_round(self) -> None:
        round_num = self.ask_number("Round: ")
        if round_num is None:
            return
        index = first_index(self.states, round_num)
        if index is not None:
            self.step = index

    def jump_turn(self) -> None:
        turn_num = self.ask_number("Turn: ")
        if turn_num is None:
            return
        index = first_index(self.states, self.state.round, turn_num)
        if index is not None:
            self.step = index

    def run(self) -> None:
        curses.curs_set(0)
        self.screen.timeout(-1)
        while True:
            self.draw()
            key = self.screen.getch()
            if key == ord("q"):
                return
            action = self._keys.get(key)
            if action:
                action()


def main(argv: list[str] | None = None) -> int:
    """Load a game log and open the viewer."""
    parser = argparse.ArgumentParser(description="Step through a Gin Rummy JSONL game log")
    parser.add_argument("logfile", type=Path, help="Game log written with --game-log")
    args = parser.parse_args(argv)

    if not args.logfile.is_file():
        print(f"No such log file: {args.logfile}", file=sys.stderr)
        return 1

    states = build_states(load_events(args.logfile))
    if not states:
        print(f"{args.logfile} contains no game events", file=sys.stderr)
        return 1

    curses.wrapper(lambda stdscr: LogViewer(stdscr, states).run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
