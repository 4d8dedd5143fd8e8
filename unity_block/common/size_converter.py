import math


# =============================================================================
# Definitions
# =============================================================================

GiB = 2**30     # Gibibyte = GiB = 2^30 B = 1,073,741,824 bytes


# =============================================================================
# Methods converting to bytes.
# =============================================================================

def convert_size_gib_to_bytes(size_in_gib):
    return int(size_in_gib) * GiB


# =============================================================================
# Methods converting from bytes.
# =============================================================================

def convert_size_bytes_to_gib(size_in_bytes):
    return float(size_in_bytes) / GiB


def convert_and_floor_size_bytes_to_gib(size_in_bytes):
    return int(size_in_bytes) // GiB


def convert_and_ceil_size_bytes_to_gib(size_in_bytes):
    return int(math.ceil(convert_size_bytes_to_gib(size_in_bytes)))
