#ui.py

import constants as C

def format_static_row(row):
    return "".join(C.STATIC_CELL_FORMAT % value for value in row)

def format_perlin_row(row):
    return "".join(C.PERLIN_CELL_FORMAT % value for value in row)

def print_static_map(noise_map):
    """Prints a static noise map as fixed-width integer columns, one line per row."""
    for row in noise_map:
        print(format_static_row(row))

def print_perlin_map(noise_map):
    """Prints a Perlin noise map with two decimals per cell, one line per row."""
    for row in noise_map:
        print(format_perlin_row(row))
