#!/usr/bin/env python3
"""
Example usage of the lifeduel package.
"""

from lifeduel import Match, PlayerId
from lifeduel.core.patterns import PatternLibrary


def main():
    """Play a short scripted duel and print the board along the way."""
    match = Match(start_paused=False)

    # Player one sends a spaceship towards the right border
    library = PatternLibrary()
    ship = library.get_pattern("Lightweight spaceship")
    match.commit(PlayerId.ONE, ship.placed_at(8, 12))

    # Player two defends with a block
    block = library.get_pattern("Block")
    match.commit(PlayerId.TWO, block.placed_at(30, 13))

    print("Initial state:")
    print(match.grid)
    print()

    for _ in range(60):
        result = match.advance()
        if result.left_damaged or result.right_damaged:
            print(
                f"Generation {match.generation}: damage left={result.left_damaged} "
                f"right={result.right_damaged}"
            )
        if match.outcome is not None:
            break

    print(f"After {match.generation} generations:")
    print(match.grid)
    print(f"Health tiers: player 1 {match.health(PlayerId.ONE)}, player 2 {match.health(PlayerId.TWO)}")


if __name__ == "__main__":
    main()
