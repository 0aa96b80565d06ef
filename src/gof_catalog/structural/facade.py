"""
Facade - one simple entry point in front of several subsystems.

The IDE facade starts and stops the editor, compiler and runtime in a
fixed order and does nothing else.
"""

from __future__ import annotations

from gof_catalog.harness.sink import OutputSink


class TextEditor:
    def __init__(self, sink: OutputSink):
        self.sink = sink

    def create_code(self) -> None:
        self.sink.emit("Writing code")

    def save(self) -> None:
        self.sink.emit("Saving code")


class Compiler:
    def __init__(self, sink: OutputSink):
        self.sink = sink

    def compile(self) -> None:
        self.sink.emit("Compiling the application")


class Runtime:
    def __init__(self, sink: OutputSink):
        self.sink = sink

    def execute(self) -> None:
        self.sink.emit("Running the application")

    def finish(self) -> None:
        self.sink.emit("Shutting down the application")


class IdeFacade:
    def __init__(self, editor: TextEditor, compiler: Compiler, runtime: Runtime):
        self.editor = editor
        self.compiler = compiler
        self.runtime = runtime

    def start(self) -> None:
        self.editor.create_code()
        self.editor.save()
        self.compiler.compile()
        self.runtime.execute()

    def stop(self) -> None:
        self.runtime.finish()


class Developer:
    """Client that only ever talks to the facade."""

    def create_application(self, facade: IdeFacade) -> None:
        facade.start()
        facade.stop()


def run_scenario(sink: OutputSink) -> None:
    """Create an application through the IDE facade."""
    ide = IdeFacade(TextEditor(sink), Compiler(sink), Runtime(sink))
    Developer().create_application(ide)
