#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import GameOfLife


def main():
    """Run the glider gun for a few generations and print each one."""
    game = GameOfLife(40, 20).add_preset_pattern()

    print("Initial state:")
    print(game)
    print(f"Population: {game.population}")
    print()

    for _ in range(30):
        game.next_generation()

    # The gun has a period of 30: the first glider is now on its way
    print(f"Generation {game.generation}:")
    print(game)
    print(f"Population: {game.population}")


if __name__ == "__main__":
    main()
