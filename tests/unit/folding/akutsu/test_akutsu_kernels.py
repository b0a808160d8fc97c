"""
Unit tests for the numba band-table kernel of the simple-pseudoknot folder.

`table[p - cut1 + 1, x, y]` holds the best two-band pairing of R1 positions
`x..cut1-1`, R2 positions `cut1..p` and R3 positions `y..N-1`.
"""
import numpy as np

from rnafoldml.folding.akutsu import fill_band_table, make_pairable_matrix


def test_pairable_matrix_is_symmetric_watson_crick():
    pairable = make_pairable_matrix("AUGCG")

    assert pairable.dtype == np.bool_
    assert pairable.shape == (5, 5)
    assert np.array_equal(pairable, pairable.T)
    assert pairable[0, 1] and pairable[2, 3] and pairable[3, 4]
    assert not pairable[1, 2]  # U-G wobble
    assert not pairable.diagonal().any()


def test_table_shape_and_empty_r2_row():
    pairable = make_pairable_matrix("GGACCUUG")
    table = fill_band_table(pairable, 2)

    assert table.shape == (6, 3, 9)
    assert table.dtype == np.int32
    assert not table[0].any()


def test_table_value_for_known_cuts():
    """
    GGACCUUG with cuts (2, 5): (0,4) and (1,3) link R1 with R2, (2,6) links R2 with R3.
    """
    table = fill_band_table(make_pairable_matrix("GGACCUUG"), 2)
    assert table[5 - 2, 0, 5] == 3


def test_shared_r2_position_is_used_once():
    """
    In AUAU with cuts (1, 2) the single R2 base U1 could pair with A0 or A2,
    but only one of them.
    """
    table = fill_band_table(make_pairable_matrix("AUAU"), 1)
    assert table[2 - 1, 0, 2] == 1


def test_table_is_monotone_in_region_sizes():
    """
    Growing any region can only keep or increase the optimum.
    """
    table = fill_band_table(make_pairable_matrix("GCAUGCAUCG"), 3)
    rows, xs, _ = table.shape
    n = 10

    for row in range(1, rows):
        p = row + 3 - 1
        for x in range(xs):
            for y in range(p + 1, n + 1):
                assert table[row, x, y] >= table[row - 1, x, y]
                if x > 0:
                    assert table[row, x - 1, y] >= table[row, x, y]
                if y > p + 1:
                    assert table[row, x, y - 1] >= table[row, x, y]
