import os
import random
import tempfile
import unittest
from typing import Optional
from unittest.mock import patch

from hrsuite.genai.namer import GenAIGroupNamer
from hrsuite.grouping.naming import GroupNameGenerator
from hrsuite.lucky_draw import EmptyPoolError
from hrsuite.workflows import (
    EventSession,
    build_default_name_generator,
    export_grouping,
    run_grouping,
    run_lucky_draw,
)


class DummyNamer(GroupNameGenerator):
    def __init__(self, names):
        self.names = names

    def generate(self, count: int, *, style: Optional[str] = None):
        return self.names[:count]


class EventSessionWorkflowTestCase(unittest.TestCase):
    def setUp(self):
        self.session = EventSession(
            rng=random.Random(2025), name_generator=DummyNamer(["Red", "Blue"])
        )
        self.session.roster.replace(["Alice", "Bob", "Carol", "Dave", "Eve"])

    def test_lucky_draw_until_pool_is_empty(self):
        winners = [run_lucky_draw(self.session) for _ in range(5)]
        self.assertEqual(len({w.id for w in winners}), 5)
        with self.assertRaises(EmptyPoolError):
            run_lucky_draw(self.session)

    def test_roster_replacement_is_seen_by_next_draw(self):
        run_lucky_draw(self.session)
        self.session.roster.replace(["Zed"])
        self.assertEqual(run_lucky_draw(self.session).name, "Zed")

    def test_run_grouping_replaces_previous_result(self):
        first = run_grouping(self.session, 3)
        self.assertEqual([g.name for g in first], ["Red", "Blue"])
        self.assertIs(self.session.groups, first)

        second = run_grouping(self.session, 2, decorate=False)
        self.assertEqual([g.name for g in second], ["Group 1", "Group 2", "Group 3"])
        self.assertIs(self.session.groups, second)

    def test_grouping_and_draw_are_independent(self):
        run_lucky_draw(self.session)
        groups = run_grouping(self.session, 5)
        self.assertEqual(sum(g.size for g in groups), 5)
        self.assertEqual(len(self.session.draw_engine.history), 1)

    def test_grouping_does_not_change_draw_sequence(self):
        names = [f"P{i}" for i in range(20)]
        plain = EventSession(rng=random.Random(7))
        grouped = EventSession(rng=random.Random(7))
        plain.roster.replace(names)
        grouped.roster.replace(names)

        run_grouping(grouped, 4, decorate=False)
        run_grouping(grouped, 3, decorate=False)

        self.assertEqual(
            [run_lucky_draw(plain).name for _ in range(5)],
            [run_lucky_draw(grouped).name for _ in range(5)],
        )

    def test_draws_do_not_change_grouping(self):
        names = [f"P{i}" for i in range(12)]
        plain = EventSession(rng=random.Random(11))
        drawn = EventSession(rng=random.Random(11))
        plain.roster.replace(names)
        drawn.roster.replace(names)

        for _ in range(4):
            run_lucky_draw(drawn)

        self.assertEqual(
            [g.members for g in run_grouping(plain, 4, decorate=False)],
            [g.members for g in run_grouping(drawn, 4, decorate=False)],
        )

    def test_engines_have_separate_random_sources(self):
        for session in (EventSession(rng=random.Random(1)), EventSession()):
            self.assertIsNot(session.draw_engine._rng, session.grouping_engine._rng)

    def test_export_grouping(self):
        with self.assertRaises(ValueError):
            export_grouping(self.session)

        run_grouping(self.session, 2)
        with tempfile.TemporaryDirectory() as tmp:
            path = export_grouping(self.session, os.path.join(tmp, "groups.csv"))
            with open(path, encoding="utf-8-sig") as f:
                lines = f.read().split("\n")
        self.assertEqual(lines[0], "GroupName,MemberName")
        self.assertEqual(len(lines), 6)


@patch("hrsuite.genai.api.load_dotenv")
@patch("dotenv.load_dotenv")
class DefaultNameGeneratorTestCase(unittest.TestCase):
    def test_without_api_key(self, mock_dotenv, mock_api_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(build_default_name_generator())

    def test_with_api_key(self, mock_dotenv, mock_api_dotenv):
        with patch.dict(os.environ, {"GENAI_API_KEY": "k"}, clear=True):
            namer = build_default_name_generator()
        self.assertIsInstance(namer, GenAIGroupNamer)

    def test_invalid_timeout_disables_naming(self, mock_dotenv, mock_api_dotenv):
        env = {"GENAI_API_KEY": "k", "GENAI_TIMEOUT": "fifteen"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertLogs("hrsuite.workflows", level="WARNING"):
                namer = build_default_name_generator()
        self.assertIsNone(namer)

        with patch.dict(os.environ, env, clear=True):
            session = EventSession(name_generator=build_default_name_generator())
        session.roster.replace(["Alice", "Bob", "Carol", "Dave"])
        groups = run_grouping(session, 2)
        self.assertEqual([g.name for g in groups], ["Group 1", "Group 2"])


if __name__ == "__main__":
    unittest.main()
