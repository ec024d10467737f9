"""Units, storage resolutions and limits of the Embedded Metric Format."""

# Units
UNIT_SECONDS = "Seconds"
UNIT_MICROSECONDS = "Microseconds"
UNIT_MILLISECONDS = "Milliseconds"
UNIT_BYTES = "Bytes"
UNIT_KILOBYTES = "Kilobytes"
UNIT_MEGABYTES = "Megabytes"
UNIT_GIGABYTES = "Gigabytes"
UNIT_TERABYTES = "Terabytes"
UNIT_BITS = "Bits"
UNIT_KILOBITS = "Kilobits"
UNIT_MEGABITS = "Megabits"
UNIT_GIGABITS = "Gigabits"
UNIT_TERABITS = "Terabits"
UNIT_PERCENT = "Percent"
UNIT_COUNT = "Count"
UNIT_BYTES_PER_SECOND = "Bytes/Second"
UNIT_KILOBYTES_PER_SECOND = "Kilobytes/Second"
UNIT_MEGABYTES_PER_SECOND = "Megabytes/Second"
UNIT_GIGABYTES_PER_SECOND = "Gigabytes/Second"
UNIT_TERABYTES_PER_SECOND = "Terabytes/Second"
UNIT_BITS_PER_SECOND = "Bits/Second"
UNIT_KILOBITS_PER_SECOND = "Kilobits/Second"
UNIT_MEGABITS_PER_SECOND = "Megabits/Second"
UNIT_GIGABITS_PER_SECOND = "Gigabits/Second"
UNIT_TERABITS_PER_SECOND = "Terabits/Second"
UNIT_COUNT_PER_SECOND = "Count/Second"
UNIT_NONE = "None"

VALID_UNITS = frozenset(
    {
        UNIT_SECONDS,
        UNIT_MICROSECONDS,
        UNIT_MILLISECONDS,
        UNIT_BYTES,
        UNIT_KILOBYTES,
        UNIT_MEGABYTES,
        UNIT_GIGABYTES,
        UNIT_TERABYTES,
        UNIT_BITS,
        UNIT_KILOBITS,
        UNIT_MEGABITS,
        UNIT_GIGABITS,
        UNIT_TERABITS,
        UNIT_PERCENT,
        UNIT_COUNT,
        UNIT_BYTES_PER_SECOND,
        UNIT_KILOBYTES_PER_SECOND,
        UNIT_MEGABYTES_PER_SECOND,
        UNIT_GIGABYTES_PER_SECOND,
        UNIT_TERABYTES_PER_SECOND,
        UNIT_BITS_PER_SECOND,
        UNIT_KILOBITS_PER_SECOND,
        UNIT_MEGABITS_PER_SECOND,
        UNIT_GIGABITS_PER_SECOND,
        UNIT_TERABITS_PER_SECOND,
        UNIT_COUNT_PER_SECOND,
        UNIT_NONE,
    }
)

# Storage resolutions
STORAGE_RESOLUTION_HIGH = 1
STORAGE_RESOLUTION_STANDARD = 60

VALID_STORAGE_RESOLUTIONS = frozenset(
    {STORAGE_RESOLUTION_HIGH, STORAGE_RESOLUTION_STANDARD}
)

# Limits
MIN_NAMESPACE_LENGTH = 1
MAX_NAMESPACE_LENGTH = 1024
MIN_METRIC_NAME_LENGTH = 1
MAX_METRIC_NAME_LENGTH = 1024
MAX_DIMENSION_NAME_LENGTH = 250
MAX_DIMENSION_SET_SIZE = 30
MIN_DIMENSION_SETS = 1

# Reserved top-level key holding the metadata object
AWS_METADATA_KEY = "_aws"
