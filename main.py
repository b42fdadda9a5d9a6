#main.py

import argparse
import cProfile
import pstats
import sys
import constants as C
from noise_maps import create_static_noise, create_perlin_noise
from permutation import make_rng
import logger as log

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Generate static and Perlin noise maps.")
    ap.add_argument("--width", type=int, default=C.DEFAULT_MAP_WIDTH)
    ap.add_argument("--height", type=int, default=C.DEFAULT_MAP_HEIGHT)
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible maps (default: OS entropy)")
    ap.add_argument("--frequency", type=int, default=C.PERLIN_SIZE, help="Grid cells per lattice cell")
    ap.add_argument("--quiet", action="store_true", help="Do not print the maps")
    ap.add_argument("--view", action="store_true", help="Open a pygame window with both maps")
    ap.add_argument("--profile", action="store_true", help="Print a cProfile report when done")
    return ap.parse_args(argv)

def generate_maps(args):
    """Generates both maps. Returns (static_map, perlin_map), either of which may be None."""
    rng = make_rng(args.seed)
    print_maps = not args.quiet

    if print_maps: print(C.STATIC_MAP_HEADER)
    static_map = create_static_noise(args.width, args.height, rng, print_map=print_maps)
    if static_map is None:
        return None, None

    if print_maps: print(C.PERLIN_MAP_HEADER)
    perlin_map = create_perlin_noise(args.width, args.height, rng, print_map=print_maps, frequency=args.frequency)
    return static_map, perlin_map

def run(args):
    log.start_clock()
    log.log(f"--- Generation Start ({args.width}x{args.height}) ---")
    if args.frequency <= 0:
        log.log(f"ERROR: frequency must be positive, got {args.frequency}")
        print(C.MAP_ERROR_MESSAGE)
        return C.EXIT_FAILURE

    static_map, perlin_map = generate_maps(args)
    if static_map is None or perlin_map is None:
        print(C.MAP_ERROR_MESSAGE)
        return C.EXIT_FAILURE

    if args.view:
        from viewer import NoiseViewer
        NoiseViewer(static_map, perlin_map).run()

    print()
    log.log("--- Generation Complete ---")
    return C.EXIT_SUCCESS

def main(argv=None):
    args = parse_args(argv)
    if not args.profile:
        return run(args)

    profiler = cProfile.Profile()
    try:
        return profiler.runcall(run, args)
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)

if __name__ == '__main__':
    sys.exit(main())
