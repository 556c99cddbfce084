"""
These constants describe the pairing-friendly curve BLS12-381 as it is used
by this package: signatures live in G1 (compressed), public keys live in G2
(uncompressed), and every secret is an integer modulo the group order R.

R and P are NOT interchangeable. Secret arithmetic (shares, coefficients,
Lagrange weights) is reduced modulo R; P only ever bounds point coordinates.
"""

from py_ecc.optimized_bls12_381 import curve_order, field_modulus

# The order of the groups G1, G2 and GT (the scalar field)
R: int = curve_order

# The prime modulus of the coordinate field
P: int = field_modulus

# Byte width of a coordinate field element
FIELD_SIZE: int = 48

# Byte width of a canonical scalar
SCALAR_SIZE: int = 32

# Compressed G1 point: 1 prefix byte + x
G1_SIZE: int = FIELD_SIZE + 1

# Uncompressed G2 point: 1 prefix byte + x (2 elements) + y (2 elements)
G2_SIZE: int = 4 * FIELD_SIZE + 1

# Random bytes drawn per scalar before reduction modulo R
RANDOM_SCALAR_SIZE: int = FIELD_SIZE

# Domain separation tag for hashing messages to G1
DST: bytes = b"BLS_SIG_BLS12381G1_XMD:SHA-256_SSWU_RO_NUL_"
