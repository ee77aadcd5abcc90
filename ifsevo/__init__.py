"""
ifsevo - Interactive 3D IFS fractal evolution

Genomes are small sets of weighted contractive affine maps. The chaos game
samples their attractors as point clouds, and a user-rated genetic
algorithm breeds new generations from the ones the user likes.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .core import *  # noqa: F401,F403
from .evolution import *  # noqa: F401,F403
from .generation import *  # noqa: F401,F403
from .repair import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
