#!/usr/bin/env python3
"""
Example usage of the lifeverse package.
"""

from lifeverse import Universe, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifeverse package."""
    # The default 64x64 universe, shown for a few generations
    universe = Universe.new()
    for _ in range(3):
        print(f"Generation {universe.generation} (population {universe.population}):")
        print(universe.render())
        universe.tick()

    # A glider on a small universe, drawn with ASCII characters
    universe = Universe(12, 12)
    glider = PatternLibrary().get_pattern("Glider")

    if glider:
        glider.apply_to_universe(universe, offset_x=4, offset_y=4)

        for _ in range(8):
            print(f"Generation {universe.generation}:")
            print(universe.render(".", "*"))
            universe.tick()

    print(repr(universe))


if __name__ == "__main__":
    main()
