# =============================================================================
# workflows/base.py  —  Linear Typed Workflow
# =============================================================================
#
# A workflow is an ordered chain of steps.  Each step declares a pydantic
# input schema and output schema:
#
#   workflow input ─▶ [step 1] ─▶ [step 2] ─▶ ... ─▶ workflow output
#
# commit() checks that the chain lines up: the workflow input schema feeds
# the first step, every step's output schema is the next step's input
# schema, and the last step's output schema is the workflow output.
#
# run() validates the data at every boundary.  There is no branching, no
# looping and no retry: the first exception (validation error, missing
# input, upstream failure) stops the run and propagates to the caller.
# =============================================================================

from dataclasses import dataclass, field
import logging
import sys
from typing import Any, Awaitable, Callable, Optional

from google.adk.agents import Agent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from pydantic import BaseModel

from core.config import Settings
from core.errors import MissingInputError

logger = logging.getLogger(__name__)

APP_NAME = "weather_assistant"
USER_ID = "workflow"


def stdout_sink(chunk: str) -> None:
    """Echo streamed text as it arrives."""
    sys.stdout.write(chunk)
    sys.stdout.flush()


async def open_session(agent: Agent) -> tuple[Runner, str]:
    """A Runner over an in-memory session for a single workflow run."""
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
    return runner, session.id


@dataclass
class WorkflowContext:
    """Everything a step may need besides its input."""

    settings: Settings
    agents: dict[str, Agent] = field(default_factory=dict)
    sink: Optional[Callable[[str], None]] = stdout_sink
    session_factory: Callable[[Agent], Awaitable[tuple[Runner, str]]] = open_session

    def get_agent(self, name: str) -> Agent:
        agent = self.agents.get(name)
        if agent is None:
            raise MissingInputError(f"Agent '{name}' not found")
        return agent


StepFn = Callable[[BaseModel, WorkflowContext], Awaitable[Any]]


@dataclass
class Step:
    """One typed unit of work."""

    id: str
    description: str
    input_schema: type[BaseModel]
    output_schema: type[BaseModel]
    execute: StepFn


def _validate(schema: type[BaseModel], data: Any, where: str) -> BaseModel:
    if data is None:
        raise MissingInputError(f"Input data not found for {where}")
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return schema.model_validate(data)


class Workflow:
    """A committed chain of Steps."""

    def __init__(
        self,
        id: str,
        input_schema: type[BaseModel],
        output_schema: type[BaseModel],
        description: str = "",
    ):
        self.id = id
        self.description = description
        self.input_schema = input_schema
        self.output_schema = output_schema
        self.steps: list[Step] = []
        self.committed = False

    def then(self, step: Step) -> "Workflow":
        if self.committed:
            raise RuntimeError(f"Workflow '{self.id}' is committed; cannot add '{step.id}'")
        self.steps.append(step)
        return self

    def commit(self) -> "Workflow":
        if not self.steps:
            raise ValueError(f"Workflow '{self.id}' has no steps")

        expected = self.input_schema
        for step in self.steps:
            if step.input_schema is not expected:
                raise TypeError(
                    f"Step '{step.id}' expects {step.input_schema.__name__} "
                    f"but receives {expected.__name__}"
                )
            expected = step.output_schema
        if expected is not self.output_schema:
            raise TypeError(
                f"Workflow '{self.id}' returns {self.output_schema.__name__} "
                f"but its last step produces {expected.__name__}"
            )

        self.committed = True
        return self

    async def run(self, input_data: Any, context: WorkflowContext) -> BaseModel:
        """Run every step in order and return the validated final output."""
        if not self.committed:
            raise RuntimeError(f"Workflow '{self.id}' must be committed before running")

        data = _validate(self.input_schema, input_data, f"workflow '{self.id}'")
        for step in self.steps:
            logger.info("[%s] step %s started", self.id, step.id)
            step_input = _validate(step.input_schema, data, f"step '{step.id}'")
            result = await step.execute(step_input, context)
            data = _validate(step.output_schema, result, f"output of step '{step.id}'")
            logger.info("[%s] step %s finished", self.id, step.id)

        return _validate(self.output_schema, data, f"output of workflow '{self.id}'")
