"""Interactive console front end for the transport simulator.

The menu loop only turns keyboard input into command values and renders the
CommandResult it gets back from `dispatch`; every rule lives in the
environment. Output goes through a rich Console, input through rich prompts.

Usage:
    $ python -m transport_simulator --seed 42 --report report.json
"""

import argparse
from typing import Any, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from .analyzer import FleetAnalyzer
from .commands import (
    MISSION_OPTIONS,
    VEHICLE_OPTIONS,
    CommandResult,
    CreateMission,
    Exit,
    ListActiveMissions,
    ListVehicles,
    RegisterVehicle,
    ShowVehicle,
    SimulateAll,
    SimulateMission,
    dispatch,
)
from .environment import Environment
from .errors import InvalidSelectionError
from .events import CONSOLE, ConsoleSink
from .obstacles import ObstacleGenerator

MENU_OPTIONS = [
    (1, "Register a new vehicle"),
    (2, "List all registered vehicles"),
    (3, "Create a new mission"),
    (4, "List all active missions"),
    (5, "Start a simulation cycle"),
    (6, "Show details of a specific vehicle"),
    (7, "Exit"),
]


class _InputStream:
    """Reads lines the way input() does: no trailing newline, EOFError at the end."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


class ConsoleApp:
    """Menu loop bound to one environment."""

    def __init__(
        self,
        environment: Optional[Environment] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            environment: Session to drive (a fresh one printing to `console` if omitted)
            console: Rich console used for output
            stream: Input stream; stdin when None
        """
        self.console = console or CONSOLE
        self.stream = _InputStream(stream) if stream is not None else None
        self.environment = environment or Environment(events=ConsoleSink(self.console))

    def run(self):
        """Show the menu until the user picks Exit or input runs out."""
        while True:
            self.print_menu()
            try:
                option = self._ask_int("Select an option")
                command = self.read_command(option)
            except InvalidSelectionError as e:
                self._print_error(str(e))
                continue
            except EOFError:
                command = Exit()

            result = dispatch(self.environment, command)
            self.render(command, result)
            if result.done:
                break

    def print_menu(self):
        grid = Table.grid(padding=(0, 1))
        for number, text in MENU_OPTIONS:
            grid.add_row(f"[b]{number}.[/b]", text)
        self.console.print(Panel(grid, title="MAIN MENU", expand=False))

    def read_command(self, option: int) -> Any:
        """Prompt for the arguments of a menu option and build its command.

        Raises:
            InvalidSelectionError: For an unknown option, or when a mission has
                to be picked and none is active.
        """
        if option == 1:
            self._print_options("Register vehicle - select type:", VEHICLE_OPTIONS)
            kind = self._ask_int("Option")
            vehicle_id = self._ask_text("Vehicle ID")
            return RegisterVehicle(kind, vehicle_id)
        if option == 2:
            return ListVehicles()
        if option == 3:
            origin = self._ask_text("Mission origin")
            destination = self._ask_text("Mission destination")
            self._print_options("Select the mission type:", MISSION_OPTIONS)
            kind = self._ask_int("Option")
            vehicle_id = self._ask_text("Assigned vehicle ID")
            cargo = FloatPrompt.ask(
                "Cargo weight", console=self.console, stream=self.stream, default=0.0
            )
            return CreateMission(origin, destination, kind, vehicle_id, cargo)
        if option == 4:
            return ListActiveMissions()
        if option == 5:
            return self._read_simulation()
        if option == 6:
            return ShowVehicle(self._ask_text("Vehicle ID to look up"))
        if option == 7:
            return Exit()
        raise InvalidSelectionError("Invalid option.")

    def _read_simulation(self) -> Any:
        self._print_options(
            "What would you like to do?",
            [(1, "Simulate all active missions"), (2, "Simulate a specific mission")],
        )
        choice = self._ask_int("Option")
        if choice == 1:
            return SimulateAll()
        if choice != 2:
            raise InvalidSelectionError("Invalid option.")

        active = self.environment.active_missions()
        if not active:
            raise InvalidSelectionError("No active missions to simulate.")
        self.console.print("Available active missions:")
        for i, mission in enumerate(active, start=1):
            self.console.print(
                f"{i}. Origin: {escape(mission.origin)}, Destination: {escape(mission.destination)} "
                f"(Vehicle: {escape(mission.vehicle.id)})"
            )
        return SimulateMission(self._ask_int("Number of the mission to simulate"))

    def render(self, command: Any, result: CommandResult):
        if not result.ok:
            self._print_error(result.message)
            return

        if isinstance(command, ListVehicles):
            self._render_vehicles(result.message, result.payload)
        elif isinstance(command, ListActiveMissions):
            self._render_missions(result.message, result.payload)
        elif isinstance(command, ShowVehicle):
            self._render_details(result.payload)
        else:
            self.console.print(f"[green]{escape(result.message)}[/green]")

    # Headings print on their own line; a table title wraps to the table width.

    def _render_vehicles(self, heading: str, vehicles: List[Any]):
        if not vehicles:
            self.console.print("No vehicles registered.")
            return
        self.console.print(heading)
        table = Table()
        table.add_column("ID")
        table.add_column("Type")
        for vehicle in vehicles:
            table.add_row(escape(vehicle.id), vehicle.kind_name)
        self.console.print(table)

    def _render_missions(self, heading: str, missions: List[Any]):
        if not missions:
            self.console.print("No active missions.")
            return
        self.console.print(heading)
        table = Table()
        table.add_column("#", justify="right")
        table.add_column("Origin")
        table.add_column("Destination")
        table.add_column("Vehicle")
        for i, mission in enumerate(missions, start=1):
            table.add_row(
                str(i), escape(mission.origin), escape(mission.destination), escape(mission.vehicle.id)
            )
        self.console.print(table)

    def _render_details(self, details: dict):
        grid = Table.grid(padding=(0, 2))
        grid.add_row("[b]ID[/b]:", escape(details["id"]))
        grid.add_row("[b]Type[/b]:", details["kind"])
        grid.add_row("[b]Capacity[/b]:", str(details["capacity"]))
        grid.add_row("[b]Location[/b]:", escape(details["location"]))
        grid.add_row("[b]Capabilities[/b]:", ", ".join(details["capabilities"]))
        self.console.print(Panel(grid, title="Vehicle details", expand=False))

    def _print_options(self, title: str, options):
        self.console.print(title)
        for number, label in options:
            self.console.print(f"{number}. {label}")

    def _print_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def _ask_int(self, prompt: str) -> int:
        return IntPrompt.ask(prompt, console=self.console, stream=self.stream)

    def _ask_text(self, prompt: str) -> str:
        value = ""
        while not value:
            value = Prompt.ask(prompt, console=self.console, stream=self.stream).strip()
        return value


def main(argv=None):
    parser = argparse.ArgumentParser(description="Autonomous transport vehicle simulator")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle generation")
    parser.add_argument("--report", help="Write a JSON mission report here on exit")
    parser.add_argument("--chart", help="Save a missions-per-vehicle chart here on exit")
    parser.add_argument("--summary", action="store_true", help="Print fleet statistics on exit")
    args = parser.parse_args(argv)

    environment = Environment(
        events=ConsoleSink(CONSOLE),
        obstacles=ObstacleGenerator(seed=args.seed),
    )
    ConsoleApp(environment).run()

    if args.summary or args.report or args.chart:
        analyzer = FleetAnalyzer(environment)
        if args.summary:
            analyzer.print_summary(CONSOLE)
        if args.report:
            analyzer.export_to_json(args.report)
            CONSOLE.print(f"Report written to {escape(args.report)}")
        if args.chart:
            analyzer.visualize(save_path=args.chart)
