"""
Primitives - Pure math functions on float32 vectors (numpy only).

- vector.py: elementwise ops, padding, sums, dot product, RMS, wrap
- statistics.py: mean, variance, median, extrema, rankings
- norms.py: norms, distances, cosine similarity, correlation
- convolution.py: full / same / valid convolution
- peaks.py: run-counter peak detection
"""

from .vector import (
    as_vector,
    log2,
    is_power_of_two,
    reverse,
    swap,
    zero_pad_at_end,
    add,
    subtract,
    total,
    sum_arrays,
    absolute,
    square,
    multiply,
    dot_product,
    root_mean_square,
    zero_crossing_rate,
    wrap,
    interpolate,
)
from .statistics import (
    arithmetic_mean,
    variance,
    standard_deviation,
    median,
    mean_absolute_deviation,
    minimum,
    maximum,
    max_index,
    max_indices,
    percentage_below_average,
)
from .norms import (
    euclidean_norm,
    city_block_norm,
    p_norm,
    euclidean_distance,
    city_block_distance,
    p_distance,
    cosine_similarity,
    cosine_similarity_with_norms,
    cosine_distance,
    correlation,
)
from .convolution import convolve, convolve_same, convolve_valid
from .peaks import peaks

__all__ = [
    # Vector
    'as_vector',
    'log2',
    'is_power_of_two',
    'reverse',
    'swap',
    'zero_pad_at_end',
    'add',
    'subtract',
    'total',
    'sum_arrays',
    'absolute',
    'square',
    'multiply',
    'dot_product',
    'root_mean_square',
    'zero_crossing_rate',
    'wrap',
    'interpolate',
    # Statistics
    'arithmetic_mean',
    'variance',
    'standard_deviation',
    'median',
    'mean_absolute_deviation',
    'minimum',
    'maximum',
    'max_index',
    'max_indices',
    'percentage_below_average',
    # Norms
    'euclidean_norm',
    'city_block_norm',
    'p_norm',
    'euclidean_distance',
    'city_block_distance',
    'p_distance',
    'cosine_similarity',
    'cosine_similarity_with_norms',
    'cosine_distance',
    'correlation',
    # Convolution
    'convolve',
    'convolve_same',
    'convolve_valid',
    # Peaks
    'peaks',
]
