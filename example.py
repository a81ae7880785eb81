#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import BaseLifeBoard, ParallelLifeBoard
from lifeboard.core.patterns import PatternLibrary


def main():
    """Run a glider on a serial board and a parallel copy side by side."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Place the glider near the top-left corner of a 20x20 board
    serial = BaseLifeBoard.gen(20, 20, glider.cell_generator(offset_row=2, offset_col=2))
    parallel = ParallelLifeBoard.from_board(serial, n_threads=4)

    print("Initial state:")
    print(serial.render("#", "."))
    print(f"Population: {serial.population}")
    print()

    for _ in range(8):
        serial.simulate_step()
        parallel.simulate_step()
        print(f"Generation {parallel.generation}:")
        print(parallel.render("#", "."))
        print(f"Population: {parallel.population}")
        print()

    # Both boards always agree, whatever the thread count
    print("Serial and parallel boards match:", serial == parallel)


if __name__ == "__main__":
    main()
