"""
Transform Algebra Tutorial

Goals:
- Build transforms by hand
- Check and enforce contractivity
- Decompose a matrix into scale/rotation/shear and rebuild it
"""

from ifsevo.core.algebra import (
    decompose_matrix,
    enforce_contractivity,
    is_contractive,
    reconstruct_matrix,
    rotation_matrix,
    spectral_radius,
)
from ifsevo.core.transform import Transform


def main():
    # A rotated, half-scale map with a translation and a color
    t = Transform(m=rotation_matrix(0.2, 0.4, 0.6, scale=0.5), tx=0.25, color=(255, 120, 40))
    print('spectral_radius:', round(spectral_radius(t.m), 4))
    print('contractive:', is_contractive(t))

    # An expanding matrix is shrunk uniformly to the 0.85 bound
    big = (1.2, 0.1, 0.0, 0.0, 1.1, 0.0, 0.0, 0.0, 0.9)
    fixed = enforce_contractivity(big)
    print('before:', round(spectral_radius(big), 4), 'after:', round(spectral_radius(fixed), 4))

    # Matrices within the bound come back unchanged (same object)
    print('unchanged:', enforce_contractivity(t.m) is t.m)

    # The decomposition is approximate: rebuilding only roughly recovers the matrix
    params = decompose_matrix(t.m)
    print('scales:', [round(v, 3) for v in (params.scale_x, params.scale_y, params.scale_z)])
    print('rotations:', [round(v, 3) for v in (params.rotation_x, params.rotation_y, params.rotation_z)])
    rebuilt = reconstruct_matrix(params)
    print('max_abs_error:', round(max(abs(a - b) for a, b in zip(rebuilt, t.m)), 4))


if __name__ == '__main__':
    main()
