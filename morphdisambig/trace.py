"""
Decision traces for the rule engine.

A trace records, position by position, which root was selected, which
ambiguity key remained and which analysis was finally kept, so a wrong
decision can be followed back to the rule that produced it.
"""
import json
import uuid
from datetime import datetime, timezone


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class DisambiguationTrace:
    """
    A single, complete trace of one sentence being disambiguated.
    """
    def __init__(self, sentence: list):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _now()
        self.end_time = None
        self.sentence = sentence
        self.steps = []
        self.result = None
        self.error = None

    def add_step(self, step_name: str, inputs: dict, outputs: dict, description: str = None):
        """
        Adds a step to the trace.

        Args:
            step_name: The name of the decision (e.g., "RootSelection", "Rule").
            inputs: A dictionary of inputs to the step.
            outputs: A dictionary of outputs from the step.
            description: An optional natural language description of the step.
        """
        step = {
            "step_id": len(self.steps) + 1,
            "name": step_name,
            "timestamp": _now(),
            "inputs": inputs,
            "outputs": outputs,
        }
        if description:
            step["description"] = description
        self.steps.append(step)

    def set_result(self, analyses: list):
        """Sets the chosen analyses and concludes the trace."""
        self.result = analyses
        self.end_time = _now()

    def set_error(self, error_message: str):
        """Records an error and concludes the trace."""
        self.error = error_message
        self.end_time = _now()

    def to_json(self, indent=2):
        """Serializes the trace to a JSON string."""
        return json.dumps(self, default=lambda o: o.__dict__, indent=indent, ensure_ascii=False)
