"""
Tests for the DisambiguationTrace.
"""
import unittest
import json
from morphdisambig.trace import DisambiguationTrace


class TestDisambiguationTrace(unittest.TestCase):

    def test_trace_initialization(self):
        """Tests that the trace is initialized correctly."""
        sentence = ["Masa", "var", "."]
        trace = DisambiguationTrace(sentence=sentence)
        self.assertEqual(trace.sentence, sentence)
        self.assertIsNotNone(trace.trace_id)
        self.assertIsNotNone(trace.start_time)
        self.assertIsNone(trace.end_time)
        self.assertEqual(trace.steps, [])
        self.assertIsNone(trace.result)
        self.assertIsNone(trace.error)

    def test_add_step(self):
        """Tests adding a step to the trace."""
        trace = DisambiguationTrace(["var"])
        trace.add_step(
            "RootAndRule",
            inputs={"position": 0},
            outputs={"root": "var"},
            description="Root selected from the root list."
        )
        self.assertEqual(len(trace.steps), 1)
        step = trace.steps[0]
        self.assertEqual(step["step_id"], 1)
        self.assertEqual(step["name"], "RootAndRule")
        self.assertEqual(step["inputs"], {"position": 0})
        self.assertEqual(step["outputs"], {"root": "var"})
        self.assertEqual(step["description"], "Root selected from the root list.")
        self.assertIsNotNone(step["timestamp"])

    def test_set_result(self):
        """Tests setting the chosen analyses."""
        trace = DisambiguationTrace(["var"])
        trace.set_result(["var+VERB+POS+IMP+A2SG"])
        self.assertEqual(trace.result, ["var+VERB+POS+IMP+A2SG"])
        self.assertIsNotNone(trace.end_time)
        self.assertIsNone(trace.error)

    def test_set_error(self):
        """Tests setting an error."""
        trace = DisambiguationTrace([])
        trace.set_error("Cannot disambiguate an empty sentence")
        self.assertEqual(trace.error, "Cannot disambiguate an empty sentence")
        self.assertIsNotNone(trace.end_time)
        self.assertIsNone(trace.result)

    def test_to_json(self):
        """Tests serialization to JSON, keeping non-ASCII surface forms."""
        trace = DisambiguationTrace(["kitabın"])
        trace.add_step("RootAndRule", inputs={}, outputs={})
        json_output = trace.to_json()
        self.assertIn("kitabın", json_output)
        data = json.loads(json_output)
        self.assertEqual(data["trace_id"], trace.trace_id)
        self.assertEqual(len(data["steps"]), 1)


if __name__ == '__main__':
    unittest.main()
