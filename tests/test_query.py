"""Query buffer editing and horizontal-scroll tests."""

from __future__ import annotations

import unittest

from lazypick.query import QueryBuffer


class QueryBufferEditingTests(unittest.TestCase):
    def test_insert_appends_and_advances_cursor(self) -> None:
        query = QueryBuffer()
        for ch in "abc":
            query.insert(ch)
        self.assertEqual(query.value(), "abc")
        self.assertEqual(query.cursor, 3)

    def test_insert_in_middle_of_text(self) -> None:
        query = QueryBuffer("ac", cursor=1)
        query.insert("b")
        self.assertEqual(query.value(), "abc")
        self.assertEqual(query.cursor, 2)

    def test_delete_backward_at_start_is_noop(self) -> None:
        query = QueryBuffer("abc", cursor=0)
        query.delete_backward()
        self.assertEqual(query.value(), "abc")
        self.assertEqual(query.cursor, 0)

    def test_delete_backward_removes_character_before_cursor(self) -> None:
        query = QueryBuffer("abc", cursor=2)
        query.delete_backward()
        self.assertEqual(query.value(), "ac")
        self.assertEqual(query.cursor, 1)

    def test_delete_forward_removes_character_under_cursor(self) -> None:
        query = QueryBuffer("abc", cursor=1)
        query.delete_forward()
        self.assertEqual(query.value(), "ac")
        self.assertEqual(query.cursor, 1)
        query.move_to_end()
        query.delete_forward()
        self.assertEqual(query.value(), "ac")

    def test_move_cursor_clamps_to_text_bounds(self) -> None:
        query = QueryBuffer("abc")
        query.move_cursor(5)
        self.assertEqual(query.cursor, 3)
        query.move_cursor(-10)
        self.assertEqual(query.cursor, 0)
        query.move_cursor(2)
        self.assertEqual(query.cursor, 2)

    def test_constructor_clamps_cursor(self) -> None:
        self.assertEqual(QueryBuffer("ab", cursor=9).cursor, 2)
        self.assertEqual(QueryBuffer("ab", cursor=-3).cursor, 0)

    def test_word_movement_and_deletion(self) -> None:
        query = QueryBuffer("foo bar baz")
        query.move_word(-1)
        self.assertEqual(query.cursor, 8)
        query.move_word(-1)
        self.assertEqual(query.cursor, 4)
        query.move_word(1)
        self.assertEqual(query.cursor, 8)

        query.move_to_end()
        query.delete_word_backward()
        self.assertEqual(query.value(), "foo bar ")
        self.assertEqual(query.cursor, 8)
        query.delete_word_backward()
        self.assertEqual(query.value(), "foo ")

    def test_delete_to_start_and_end(self) -> None:
        query = QueryBuffer("foo bar", cursor=4)
        query.delete_to_start()
        self.assertEqual(query.value(), "bar")
        self.assertEqual(query.cursor, 0)

        query = QueryBuffer("foo bar", cursor=3)
        query.delete_to_end()
        self.assertEqual(query.value(), "foo")
        self.assertEqual(query.cursor, 3)

    def test_any_character_is_accepted(self) -> None:
        query = QueryBuffer()
        query.insert("\t")
        query.insert("日")
        self.assertEqual(query.value(), "\t日")


class QueryBufferScrollTests(unittest.TestCase):
    def test_no_scroll_while_cursor_fits(self) -> None:
        query = QueryBuffer("abc")
        self.assertEqual(query.visual_scroll(10), 0)
        self.assertEqual(query.visual_scroll(4), 0)

    def test_scroll_is_minimal_offset_keeping_cursor_visible(self) -> None:
        query = QueryBuffer("abcdef")
        scroll = query.visual_scroll(4)
        self.assertEqual(scroll, 3)
        self.assertLess(query.visual_cursor() - scroll, 4)

    def test_scroll_follows_cursor_back_to_start(self) -> None:
        query = QueryBuffer("abcdef", cursor=0)
        self.assertEqual(query.visual_scroll(2), 0)

    def test_wide_characters_count_two_columns(self) -> None:
        query = QueryBuffer("日本語")
        self.assertEqual(query.visual_cursor(), 6)
        scroll = query.visual_scroll(3)
        self.assertEqual(scroll, 4)
        self.assertLess(query.visual_cursor() - scroll, 3)

    def test_zero_width_viewport_is_treated_as_one_column(self) -> None:
        query = QueryBuffer("abc")
        self.assertEqual(query.visual_scroll(0), 3)


if __name__ == "__main__":
    unittest.main()
