"""
Default settings for the disambiguators.

Values can be overridden through environment variables or, more commonly,
through constructor arguments.
"""
import os

# Root list read by the rule engine when no path is given
ROOT_LIST_PATH = os.environ.get('MORPHDISAMBIG_ROOT_LIST', 'rootlist.txt')

# Log file used by the command-line interface
LOG_FILE = os.environ.get('MORPHDISAMBIG_LOG_FILE', 'morphdisambig.log')

# Additive constant of the unigram (Laplace) smoothing
LAPLACE_DELTA = 1.0

# Weight of the bigram maximum-likelihood estimate in interpolated smoothing;
# the remainder goes to the unigram estimate of the second token
INTERPOLATION_LAMBDA = 0.8

# Separator between the distinct sub-analyses of an ambiguity key
KEY_SEPARATOR = '$'

# Separator between inflectional groups inside a parse string
DERIVATIONAL_BOUNDARY = '^DB+'
