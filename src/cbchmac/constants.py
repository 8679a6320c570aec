"""Framing constants and defaults for cbchmac."""

# AES block size in bits (PKCS#7 padding granularity)
AES_BLOCK_SIZE_BITS = 128

# CBC initialization vector size in bytes
IV_SIZE = 16

# AL field: 64-bit big-endian AAD bit length
AL_SIZE = 8

# Only the low 32 bits of AL are ever populated
MAX_AAD_BITS = 0xFFFFFFFF

# Stream adapter settings
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_MAX_PENDING = 16
