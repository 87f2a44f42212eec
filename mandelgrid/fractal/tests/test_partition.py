"""
  Test of row partitioning within partition.py
"""

import unittest

from mandelgrid.fractal.partition import balance, partition_rows


#-------------------------------------------------------------

class Test_Partition(unittest.TestCase):

    def test_balance(self):
        assert balance(10, 3, 0) == (0, 4)
        assert balance(10, 3, 1) == (4, 7)
        assert balance(10, 3, 2) == (7, 10)

        assert balance(9, 3, 0) == (0, 3)
        assert balance(9, 3, 2) == (6, 9)

        # More bins than items
        assert balance(2, 4, 0) == (0, 1)
        assert balance(2, 4, 1) == (1, 2)
        assert balance(2, 4, 2) == (2, 2)
        assert balance(2, 4, 3) == (2, 2)


    def test_balance_covers_everything(self):
        for N in [0, 1, 7, 100, 701]:
            for P in [1, 2, 3, 8, 24]:
                Nhi_prev = 0
                for p in range(P):
                    Nlo, Nhi = balance(N, P, p)
                    assert Nlo == Nhi_prev
                    assert 0 <= Nhi - Nlo <= N//P + 1
                    Nhi_prev = Nhi
                assert Nhi_prev == N


    def test_rows_schedule(self):
        assert partition_rows(4, 2, 'rows') == [[0], [1], [2], [3]]


    def test_blockwise_schedule(self):
        assert partition_rows(10, 3, 'blockwise') == [[0, 1, 2, 3],
                                                      [4, 5, 6],
                                                      [7, 8, 9]]


    def test_cyclic_schedule(self):
        assert partition_rows(10, 3, 'cyclic') == [[0, 3, 6, 9],
                                                   [1, 4, 7],
                                                   [2, 5, 8]]


    def test_every_row_exactly_once(self):
        for schedule in ['rows', 'blockwise', 'cyclic']:
            for height in [1, 5, 33]:
                for P in [1, 2, 4, 40]:
                    tasks = partition_rows(height, P, schedule)
                    rows = sorted(j for task in tasks for j in task)
                    assert rows == list(range(height))
                    for task in tasks:
                        assert len(task) > 0


    def test_empty_height(self):
        for schedule in ['rows', 'blockwise', 'cyclic']:
            assert partition_rows(0, 4, schedule) == []


    def test_unknown_schedule(self):
        self.assertRaises(ValueError, partition_rows, 10, 2, 'dynamic')


    def test_non_positive_bins(self):
        self.assertRaises(ValueError, partition_rows, 10, 0, 'cyclic')


#-------------------------------------------------------------
if __name__ == "__main__":
    suite = unittest.TestLoader().loadTestsFromTestCase(Test_Partition)
    runner = unittest.TextTestRunner()
    runner.run(suite)
