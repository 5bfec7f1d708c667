#!/usr/bin/env python3

import argparse
import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Sequence

from app_context import AppContext
from command_recorder import CommandRecorder
from flight_states import Ascending, FlightPhase
from launch_configuration import DEFAULT_LAUNCH_CONFIGURATION, LaunchConfiguration
from launch_sequencer import CommandResult, LaunchSequencer
from sims.flight_physics import Telemetry

WELCOME = "Welcome to the Rocket Launch Simulator!"
PROMPT = "Enter command (start_checks, launch, fast_forward X, exit): "

USAGE_FAST_FORWARD = "Usage: fast_forward X"
INVALID_SECONDS = "Invalid input. Please enter a valid number of seconds."
UNKNOWN_COMMAND = "Unknown command. Please try again."


class CommandParseError(ValueError):
    # Malformed operator input. The message is shown to the operator as-is.
    pass


class CommandKind(Enum):
    START_CHECKS = auto()
    LAUNCH = auto()
    FAST_FORWARD = auto()
    STATUS = auto()
    HELP = auto()
    EXIT = auto()


_KEYWORDS = {
    "start_checks": CommandKind.START_CHECKS,
    "launch": CommandKind.LAUNCH,
    "fast_forward": CommandKind.FAST_FORWARD,
    "status": CommandKind.STATUS,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
    "exit": CommandKind.EXIT,
    "quit": CommandKind.EXIT,
    "q": CommandKind.EXIT,
}


@dataclass(frozen=True)
class OperatorCommand:
    kind: CommandKind
    seconds: int | None = None


def parse_command(line: str) -> OperatorCommand | None:
    """
    Parse one line of operator input.

    Returns None for a blank line. Raises CommandParseError for unknown
    commands and for a fast_forward with a missing, extra, non-numeric or
    non-positive argument, so the sequencer is never called with bad input.
    """
    parts = line.strip().split()
    if not parts:
        return None

    op = parts[0].lower()
    kind = _KEYWORDS.get(op)
    if kind is None:
        raise CommandParseError(UNKNOWN_COMMAND)

    if kind is CommandKind.FAST_FORWARD:
        if len(parts) != 2:
            raise CommandParseError(USAGE_FAST_FORWARD)
        try:
            seconds = int(parts[1])
        except ValueError:
            raise CommandParseError(INVALID_SECONDS) from None
        if seconds <= 0:
            raise CommandParseError(INVALID_SECONDS)
        return OperatorCommand(kind, seconds)

    if len(parts) != 1:
        raise CommandParseError(UNKNOWN_COMMAND)
    return OperatorCommand(kind)


# -------------------------
# Presentation
# -------------------------

def format_telemetry(t: Telemetry) -> str:
    return (
        f"Stage: {t.elapsed_seconds}, Fuel: {t.fuel_percent}%, "
        f"Altitude: {t.altitude_km} km, Speed: {t.speed_kph} km/h"
    )


def print_result(result: CommandResult) -> None:
    print(result.message)
    for snapshot in result.snapshots:
        print(format_telemetry(snapshot))
    if result.outcome is not None:
        print(result.outcome.message)


class StateAnnunciator:
    # Prints the flight phase whenever it differs from the last one printed.
    def __init__(self):
        self._last: FlightPhase | None = None

    def __call__(self, sequencer: LaunchSequencer) -> None:
        phase = sequencer.phase
        if phase != self._last:
            print(f"STATE: {phase.name}")
            self._last = phase


def _print_status(sequencer: LaunchSequencer) -> None:
    state = sequencer.state
    line = f"Phase: {sequencer.phase.name}"
    if isinstance(state, Ascending):
        line += f" (stage {state.stage})"
    print(line)
    print(format_telemetry(sequencer.telemetry()))
    if sequencer.outcome is not None:
        print(f"Outcome: {sequencer.outcome.message}")


def _print_help() -> None:
    print(
        """
Commands
  start_checks                 Run pre-launch checks (PRE_LAUNCH -> ASCENDING)
  launch                       Fly the ascent until orbit or fuel exhaustion
  fast_forward <seconds>       Fly at most <seconds> whole seconds of ascent
  status                       Print flight phase and telemetry
  help                         Print help
  exit                         Quit
"""
    )


# -------------------------
# Command execution
# -------------------------

def execute(sequencer: LaunchSequencer, command: OperatorCommand) -> list[CommandResult]:
    # Maps an operator command onto sequencer calls. Display-only commands return [].
    if command.kind is CommandKind.START_CHECKS:
        return [sequencer.begin_checks()]

    if command.kind is CommandKind.LAUNCH:
        return [sequencer.launch()]

    if command.kind is CommandKind.FAST_FORWARD:
        results = []
        if not isinstance(sequencer.state, Ascending):
            results.append(sequencer.launch())
        results.append(sequencer.advance(command.seconds))
        return results

    return []


def handle_line(ctx: AppContext, line: str) -> bool:
    # Processes one line of input; returns False when the loop should end.
    try:
        command = parse_command(line)
    except CommandParseError as e:
        print(e)
        ctx.record(line, "invalid", False)
        return True

    if command is None:
        return True

    action = command.kind.name.lower()

    if command.kind is CommandKind.EXIT:
        print("Exiting the simulator.")
        ctx.record(line, action, True)
        return False

    if command.kind is CommandKind.HELP:
        _print_help()
        ctx.record(line, action, True)
        return True

    if command.kind is CommandKind.STATUS:
        _print_status(ctx.sequencer)
        ctx.record(line, action, True)
        return True

    results = execute(ctx.sequencer, command)
    for result in results:
        print_result(result)
    ctx.annunciator(ctx.sequencer)
    ctx.record(line, action, results[-1].accepted)
    return True


# -------------------------
# Process setup
# -------------------------

def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive rocket launch sequencer",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic log level written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--record-commands",
        dest="record_commands",
        type=Path,
        default=None,
        metavar="PATH",
        help="Append a CSV transcript of operator commands to PATH.",
    )
    return parser.parse_args(argv)


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def initialize(
    config: LaunchConfiguration = DEFAULT_LAUNCH_CONFIGURATION,
    record_path: Path | None = None,
) -> AppContext:
    logging.info("Initializing launch sequencer (vehicle=%s)", config.name)

    if not config.reaches_orbit_before_burnout():
        logging.warning(
            "Vehicle %s burns out at t=%ds before orbit at t=%ds",
            config.name,
            config.compute_burnout_time_s(),
            config.compute_orbit_time_s(),
        )

    recorder = None
    if record_path is not None:
        recorder = CommandRecorder(filepath=record_path, clock=time.time)

    return AppContext(
        sequencer=LaunchSequencer(config=config),
        config=config,
        annunciator=StateAnnunciator(),
        recorder=recorder,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    ctx = initialize(record_path=args.record_commands)

    print(WELCOME)
    ctx.annunciator(ctx.sequencer)

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not handle_line(ctx, line):
            break

    logging.info("Command loop terminated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
