FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = "/var/log/mathex/logs.log"

TRUE = 1
FALSE = 0
ERROR = -1

INTEGER_BITS = 64  # bitwise operators work on signed two's-complement integers of this width
INTEGER_MODULUS = 1 << INTEGER_BITS
INTEGER_MIN = -(1 << (INTEGER_BITS - 1))
INTEGER_MAX = (1 << (INTEGER_BITS - 1)) - 1

EXCERPT_RADIUS = 8  # characters shown on each side of a tokenization error

ALPHABET_SIZE = 26
