# Character encoding configs
CHUNK_BITS: int = 5                 # payload bits carried by one character
CHUNK_MASK: int = 0x1F              # low 5 bits
CONTINUATION_THRESHOLD: int = 32    # values >= 32 need another character

# Alphabet offsets
TERMINAL_OFFSET: int = 63       # terminal characters fall in [63, 95)
CONTINUATION_OFFSET: int = 95   # continuation characters fall in [95, 127)
ALPHABET_END: int = 127         # exclusive upper bound of the alphabet

# Coordinate transform configs
DEFAULT_PRECISION: int = 5  # decimal digits kept (scale factor 1e5)
DEFAULT_DIM: int = 2        # interleaved lat/lng
