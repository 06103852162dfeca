import unittest
from connectfour.core.config import EngineConfig
from connectfour.engine.board import create_board, place_piece
from connectfour.engine.evaluation import evaluate, count_patterns
from connectfour.models.enums import Player


class TestEvaluation(unittest.TestCase):
    def setUp(self):
        self.board = create_board()

    def test_empty_board_scores_zero(self):
        self.assertEqual(evaluate(self.board), 0)
        self.assertEqual(evaluate(self.board, Player.ONE), 0)

    def test_center_piece_favours_owner(self):
        """A single center piece only earns the positional weight."""
        own = create_board()
        place_piece(own, 3, Player.TWO)
        self.assertGreater(evaluate(own), 0)
        self.assertEqual(evaluate(own), 3)

        theirs = create_board()
        place_piece(theirs, 3, Player.ONE)
        self.assertLess(evaluate(theirs), 0)
        self.assertEqual(evaluate(theirs), -3)

    def test_adjacent_columns_weigh_less_than_center(self):
        adjacent = create_board()
        place_piece(adjacent, 2, Player.TWO)
        center = create_board()
        place_piece(center, 3, Player.TWO)
        edge = create_board()
        place_piece(edge, 0, Player.TWO)

        self.assertEqual(evaluate(adjacent), 2)
        self.assertGreater(evaluate(center), evaluate(adjacent))
        self.assertEqual(evaluate(edge), 0)

    def test_three_pattern_beats_two_pattern(self):
        two = create_board()
        for col in (0, 1):
            place_piece(two, col, Player.TWO)
        three = create_board()
        for col in (0, 1, 2):
            place_piece(three, col, Player.TWO)

        self.assertEqual(count_patterns(two, Player.TWO), (1, 0))
        self.assertEqual(count_patterns(three, Player.TWO), (1, 1))
        self.assertEqual(evaluate(two), 10)
        self.assertEqual(evaluate(three), 50 + 10 + 2)
        self.assertGreater(evaluate(three), evaluate(two))

    def test_blocked_window_does_not_count(self):
        for col in (0, 1, 2):
            place_piece(self.board, col, Player.TWO)
        place_piece(self.board, 3, Player.ONE)

        # Every horizontal window of the bottom row now touches an opponent piece
        twos, threes = count_patterns(self.board, Player.TWO)
        self.assertEqual(threes, 0)
        self.assertEqual(twos, 0)

    def test_perspective_is_antisymmetric(self):
        for col, player in [(3, Player.ONE), (3, Player.TWO), (2, Player.ONE), (4, Player.TWO), (4, Player.TWO)]:
            place_piece(self.board, col, player)

        self.assertEqual(evaluate(self.board, Player.ONE), -evaluate(self.board, Player.TWO))

    def test_custom_weights(self):
        place_piece(self.board, 3, Player.TWO)
        config = EngineConfig(center_weight=7)
        self.assertEqual(evaluate(self.board, Player.TWO, config), 7)

        no_positional = EngineConfig(center_weight=0, adjacent_weight=0, two_weight=1)
        place_piece(self.board, 4, Player.TWO)
        # Bottom row (3,4) sits in 3 open horizontal windows: starts 1, 2, 3
        self.assertEqual(evaluate(self.board, Player.TWO, no_positional), 3)

if __name__ == '__main__':
    unittest.main()
