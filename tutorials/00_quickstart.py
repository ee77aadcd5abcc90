from ifsevo.core.library import barnsley_fern
from ifsevo.generation.chaos_game import generate_points
from ifsevo.utils.rng_manager import Mulberry32


def main():
    # Quickstart goal:
    # 1) Take a ready-made genome from the seed library
    # 2) Sample its attractor with the chaos game
    # 3) Inspect the resulting point cloud

    # Seed constructors return a generation-0 genome with 2-8 transforms.
    genome = barnsley_fern()
    print('transforms:', genome.transform_count)

    # Run the chaos game. A seeded Mulberry32 stream makes the cloud reproducible;
    # omit rng for a fresh non-deterministic run.
    cloud = generate_points(genome, iterations=20000, rng=Mulberry32(1))

    # Positions are normalized into [-1, 1]^3, colors into [0, 1].
    print('points:', cloud.count)
    print('positions_shape:', tuple(cloud.positions.shape))
    print('bounds:', cloud.positions.min(axis=0).round(3).tolist(), cloud.positions.max(axis=0).round(3).tolist())
    print('divergences:', cloud.metrics.divergences)


if __name__ == '__main__':
    main()
