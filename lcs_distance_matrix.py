# -*- coding: utf-8 -*-

import logging

import numpy as np

from lcs_tables import llcs_table

logger = logging.getLogger(__name__)

def PairwiseLCSDistance(sequences):
    """Compute sequence pair-wise LCS distance.

    Take sequences as inputs and generate a distance matrix based on the
    length of their longest common subsequence relative to the longer one.

    Args:
        sequences: list of sequences.

    Returns:
        distance matrix.
    """

    seq = sequences
    N = len(seq)

    # Similarity matrix, -1 marks pairs not computed yet
    s_matrix = np.zeros((N, N), np.float64)
    s_matrix.fill(-1)

    for i in range(N):
        for j in range(N):

            if s_matrix[i][j] >= 0:
                continue

            maxlen = max(len(seq[i]), len(seq[j]))
            if maxlen == 0:
                sims = 1.0
            else:
                sims = llcs_table(seq[i], seq[j])[-1, -1] / float(maxlen)

            # LCS length is symmetric
            s_matrix[i][j] = s_matrix[j][i] = sims

    return 1.0 - s_matrix

def distance_matrix(sequences):
    """Compute sequence LCS distances.

    Take sequences as inputs and generate a sequence distance matrix for
    further clustering.

    Args:
        sequences: list of sequences.

    Returns:
        distance matrix.

    Raises:
        ValueError: no sequences given.
    """

    if len(sequences) == 0:
        raise ValueError("No sequences found")
    logger.info("Found %d sequences", len(sequences))

    logger.info("Creating distance matrix start.")
    dmx = PairwiseLCSDistance(sequences)
    logger.info("Distance matrix complete.")
    return dmx
