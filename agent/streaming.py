# =============================================================================
# agent/streaming.py  —  Streamed Agent Text
# =============================================================================
#
# With StreamingMode.SSE, ADK yields the model's answer as a series of
# PARTIAL events (event.partial is True), each carrying the next chunk of
# text, followed by one final event with the whole text again.
#
# stream_agent_text() turns that into a plain async stream of text chunks:
#   - partial chunks are yielded in order (and forwarded to an optional sink)
#   - the final aggregated text is only used when the model sent no partial
#     chunks at all, so text is never yielded twice
#   - tool-call events are reported to on_tool_call, not yielded
# =============================================================================

from typing import AsyncIterator, Callable, Optional

from google.adk.agents.run_config import RunConfig, StreamingMode
from google.adk.runners import Runner
from google.genai import types


def user_message(text: str) -> types.Content:
    """Wrap plain text in ADK's user message format."""
    return types.Content(role="user", parts=[types.Part(text=text)])


def _event_text(event) -> str:
    if not event.content or not event.content.parts:
        return ""
    return "".join(part.text for part in event.content.parts if getattr(part, "text", None))


def _event_tool_calls(event) -> list[str]:
    if not event.content or not event.content.parts:
        return []
    return [
        part.function_call.name
        for part in event.content.parts
        if getattr(part, "function_call", None)
    ]


async def stream_agent_text(
    runner: Runner,
    user_id: str,
    session_id: str,
    prompt: str,
    sink: Optional[Callable[[str], None]] = None,
    on_tool_call: Optional[Callable[[str], None]] = None,
) -> AsyncIterator[str]:
    """Run the agent on ``prompt`` and yield its reply as text chunks."""
    streamed_any = False
    final_text = ""

    async for event in runner.run_async(
        user_id=user_id,
        session_id=session_id,
        new_message=user_message(prompt),
        run_config=RunConfig(streaming_mode=StreamingMode.SSE),
    ):
        if on_tool_call is not None:
            for name in _event_tool_calls(event):
                on_tool_call(name)

        text = _event_text(event)
        if not text:
            continue

        if event.partial:
            streamed_any = True
            if sink is not None:
                sink(text)
            yield text
        elif event.is_final_response():
            final_text = text

    if not streamed_any and final_text:
        if sink is not None:
            sink(final_text)
        yield final_text


async def collect_agent_text(
    runner: Runner,
    user_id: str,
    session_id: str,
    prompt: str,
    sink: Optional[Callable[[str], None]] = None,
    on_tool_call: Optional[Callable[[str], None]] = None,
) -> str:
    """Concatenate every chunk from stream_agent_text()."""
    chunks = []
    async for chunk in stream_agent_text(
        runner, user_id, session_id, prompt, sink=sink, on_tool_call=on_tool_call
    ):
        chunks.append(chunk)
    return "".join(chunks)
