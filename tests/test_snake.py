import unittest

from snake_game.snake import Snake, is_valid_turn, UP, DOWN, LEFT, RIGHT


class TestDirectionValidation(unittest.TestCase):

    def test_reversal_is_rejected(self):
        self.assertFalse(is_valid_turn(RIGHT, LEFT))
        self.assertFalse(is_valid_turn(UP, DOWN))

    def test_perpendicular_and_same_heading_allowed(self):
        self.assertTrue(is_valid_turn(RIGHT, UP))
        self.assertTrue(is_valid_turn(RIGHT, DOWN))
        self.assertTrue(is_valid_turn(RIGHT, RIGHT))


class TestSnake(unittest.TestCase):

    def setUp(self):
        self.snake = Snake(50, 50, length=4, velocity=RIGHT)

    def test_request_reversal_keeps_pending_direction(self):
        self.assertFalse(self.snake.request_direction(LEFT))
        self.assertEqual(self.snake.next_velocity, RIGHT)

    def test_pending_direction_applies_at_tick_start(self):
        self.assertTrue(self.snake.request_direction(UP))
        self.assertEqual(self.snake.velocity, RIGHT)
        self.snake.apply_pending_direction()
        self.assertEqual(self.snake.velocity, UP)

    def test_two_quick_presses_cannot_reverse(self):
        # Up then Left within one tick: Left is checked against the active heading
        self.snake.request_direction(UP)
        self.snake.request_direction(LEFT)
        self.snake.apply_pending_direction()
        self.assertEqual(self.snake.velocity, UP)

    def test_pending_reversal_set_directly_is_ignored(self):
        self.snake.next_velocity_x, self.snake.next_velocity_y = LEFT
        self.snake.apply_pending_direction()
        self.assertEqual(self.snake.velocity, RIGHT)
        self.assertEqual(self.snake.next_velocity, RIGHT)

    def test_advance_moves_one_tile(self):
        self.snake.advance(10)
        self.assertEqual(self.snake.head, (60, 50))

    def test_body_history_is_trimmed_to_length(self):
        for _ in range(10):
            self.snake.advance(10)
            self.snake.record_position()
            self.assertLessEqual(len(self.snake.body), self.snake.length)
        self.assertEqual(len(self.snake.body), 4)
        self.assertEqual(self.snake.body[-1], self.snake.head)
        self.assertEqual(self.snake.body[0], (120, 50))

    def test_grow(self):
        self.snake.grow()
        self.assertEqual(self.snake.length, 5)

    def test_hits_body(self):
        self.snake.body.extend([(60, 50), (70, 50)])
        self.assertFalse(self.snake.hits_body())
        self.snake.x = 70
        self.assertTrue(self.snake.hits_body())

    def test_occupies_head_and_body(self):
        self.snake.body.append((40, 50))
        self.assertTrue(self.snake.occupies((50, 50)))
        self.assertTrue(self.snake.occupies((40, 50)))
        self.assertFalse(self.snake.occupies((0, 0)))

    def test_reset_clears_body_keeps_length(self):
        self.snake.grow(2)
        self.snake.record_position()
        self.snake.reset(0, 0)
        self.assertEqual(len(self.snake.body), 0)
        self.assertEqual(self.snake.length, 6)
        self.assertEqual(self.snake.head, (0, 0))


if __name__ == '__main__':
    unittest.main()
