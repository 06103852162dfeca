import logging
import sys
import time

from connectfour.core.config import load_config
from connectfour.engine.board import render_board
from connectfour.models.enums import GameMode, MatchStatus
from connectfour.services.match_service import Match, InvalidMoveError


def ask_mode() -> GameMode:
    while True:
        choice = input("Mode - [c]pu or [p]vp: ").strip().lower()
        if choice in ("c", "cpu"):
            return GameMode.CPU
        if choice in ("p", "pvp"):
            return GameMode.PVP
        print("Please type 'c' or 'p'.")


def play_round(match: Match, input_fn=input, clock=time.time):
    """
    Plays one round to completion. Each human turn has `turn_time_limit` seconds,
    counted from the start of the turn across retries; a late answer forfeits.
    """
    print(render_board(match.board))
    turn_start = None

    while not match.is_over:

        # --- CPU Turn ---
        if match.is_cpu_turn():
            print("\nCPU is thinking...")
            time.sleep(match.config.cpu_delay_ms / 1000)
            record = match.play_cpu()
            print(f"CPU plays Column: {record.column} ({record.duration}s)")

        # --- Human Turn ---
        else:
            name = match.player_name(match.current_player)
            valid_moves = match.snapshot().valid_moves
            limit = match.config.turn_time_limit
            if turn_start is None:
                turn_start = clock()

            user_input = input_fn(f"\n{name}, your move (Columns {valid_moves}, {limit}s): ")
            if clock() - turn_start > limit:
                match.forfeit()
                print(f"\nTime's up! {name} took longer than {limit}s.")
                break

            try:
                match.play(int(user_input))
                turn_start = None
            except InvalidMoveError as e:
                print(f"{e}. Try again.")
                continue
            except ValueError:
                print("Please enter a valid number.")
                continue

        # Show Board
        print("\n" + render_board(match.board))

    # --- End Round ---
    if match.status == MatchStatus.WON:
        print(f"\nRound Over! Winner: {match.player_name(match.winner)}")
    else:
        print("\nRound Over! It's a Draw.")


def main():
    logging.basicConfig(level=logging.WARNING)

    print("=======================================")
    print("          CONNECT FOUR (console)       ")
    print("=======================================")

    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    match = Match(mode=ask_mode(), config=config)

    while True:
        play_round(match)
        scores = ", ".join(f"{match.player_name(p)}: {s}" for p, s in match.scores.items())
        print(f"Score - {scores}")

        if input("Play again? [y/N]: ").strip().lower() != "y":
            break
        match.restart()


if __name__ == "__main__":
    main()
