# activities/tests/test_rendering.py
"""
Tests for the board view models and the unregister binding step.
"""

from django.test import SimpleTestCase

from activities.models import BoardState, parse_catalog
from activities.pipeline import FilterCriteria
from activities.rendering import (
    SELECT_PLACEHOLDER,
    bind_unregister_actions,
    render_board,
)

from .utils import catalog_payload


class RenderBoardTests(SimpleTestCase):
    def setUp(self):
        self.state = BoardState()
        self.state.replace(parse_catalog(catalog_payload()))

    def test_cards_follow_pipeline_order(self):
        view = render_board(self.state, FilterCriteria(sort="name"))
        self.assertEqual(
            [card.name for card in view.cards],
            ["Art Studio", "Chess Club", "Chess Masters", "Drama Club", "Programming Class"],
        )

    def test_activity_options_mirror_cards(self):
        view = render_board(self.state, FilterCriteria(category="Creative"))
        self.assertEqual(
            view.activity_options,
            [("", SELECT_PLACEHOLDER), ("Art Studio", "Art Studio"), ("Drama Club", "Drama Club")],
        )

    def test_category_options_start_with_all(self):
        view = render_board(self.state, FilterCriteria(category="Creative"))
        self.assertEqual(
            view.category_options,
            [("", "All"), ("Chess", "Chess"), ("Programming", "Programming"), ("Creative", "Creative")],
        )

    def test_card_fields(self):
        view = render_board(self.state, FilterCriteria(search="art studio"))
        (card,) = view.cards
        self.assertEqual(card.description, "Painting and drawing")
        self.assertEqual(card.schedule, "Wednesdays, 3:30 PM - 5:00 PM")
        self.assertEqual(card.spots_left, -1)
        self.assertEqual(
            [row.email for row in card.participants],
            ["a@mergington.edu", "b@mergington.edu", "c@mergington.edu"],
        )

    def test_empty_participant_list(self):
        view = render_board(self.state, FilterCriteria(search="drama"))
        (card,) = view.cards
        self.assertFalse(card.has_participants)
        self.assertEqual(card.participants, [])

    def test_empty_state_renders_placeholder_only(self):
        view = render_board(BoardState(), FilterCriteria())
        self.assertEqual(view.cards, [])
        self.assertEqual(view.activity_options, [("", SELECT_PLACEHOLDER)])
        self.assertEqual(view.category_options, [("", "All")])

    def test_render_leaves_rows_unbound(self):
        view = render_board(self.state, FilterCriteria())
        self.assertTrue(all(row.unregister_form is None for row in view.participant_rows()))

    def test_render_builds_new_cards_each_time(self):
        first = render_board(self.state, FilterCriteria())
        second = render_board(self.state, FilterCriteria())
        self.assertEqual(first, second)
        self.assertIsNot(first.cards[0], second.cards[0])


class BindUnregisterActionsTests(SimpleTestCase):
    def setUp(self):
        state = BoardState()
        state.replace(parse_catalog(catalog_payload()))
        self.view = render_board(state, FilterCriteria())

    def test_every_row_gets_its_own_action(self):
        bind_unregister_actions(self.view)
        rows = list(self.view.participant_rows())
        self.assertEqual(len(rows), 6)
        for row in rows:
            self.assertEqual(
                row.unregister_form.initial, {"activity": row.activity, "email": row.email}
            )

    def test_rebinding_replaces_previous_actions(self):
        bind_unregister_actions(self.view)
        before = [row.unregister_form for row in self.view.participant_rows()]
        bind_unregister_actions(self.view)
        after = [row.unregister_form for row in self.view.participant_rows()]

        for old, new in zip(before, after):
            self.assertIsNot(old, new)
            self.assertEqual(old.initial, new.initial)
