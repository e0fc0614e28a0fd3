"""
Analyzer for summarising, exporting and visualising a simulation session.
"""

from typing import Any, Dict, List, Optional
import json

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .environment import Environment
from .events import CONSOLE
from .vehicles import VehicleKind

COLUMNS = [
    "id",
    "origin",
    "destination",
    "vehicle_id",
    "vehicle_kind",
    "mission_kind",
    "cargo_weight",
    "completed",
    "obstacle",
]


class FleetAnalyzer:
    """Builds reports over the vehicles and missions of one environment."""

    def __init__(self, environment: Environment):
        self.environment = environment

    def _latest_obstacles(self) -> Dict[int, Optional[str]]:
        latest = {}
        for outcome in self.environment.history:
            latest[id(outcome.mission)] = outcome.obstacle.description if outcome.obstacle else None
        return latest

    def mission_rows(self) -> List[Dict[str, Any]]:
        """One plain-data row per mission, including the obstacle of its latest run."""
        latest = self._latest_obstacles()
        rows = []
        for mission in self.environment.missions:
            row = mission.to_dict()
            row["obstacle"] = latest.get(id(mission))
            rows.append(row)
        return rows

    def mission_frame(self) -> pd.DataFrame:
        """Missions as a DataFrame indexed by registration order.

        The obstacle column keeps None for missions never simulated.
        """
        rows = self.mission_rows()
        frame = pd.DataFrame(rows, columns=COLUMNS)
        frame["obstacle"] = pd.Series([row["obstacle"] for row in rows], index=frame.index, dtype=object)
        return frame

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get a statistical summary of the session.

        Returns:
            Dictionary with counts, completion rate, per-kind and per-domain
            breakdowns and cargo weight statistics
        """
        env = self.environment
        missions = env.missions
        completed = len(env.completed_missions())

        per_kind = {kind.label: 0 for kind in VehicleKind}
        for mission in missions:
            per_kind[mission.vehicle.kind.label] += 1

        obstacles: Dict[str, int] = {}
        for outcome in env.history:
            if outcome.obstacle is not None:
                domain = outcome.obstacle.domain.value
                obstacles[domain] = obstacles.get(domain, 0) + 1

        stats = {
            "num_vehicles": len(env.vehicles),
            "num_missions": len(missions),
            "active_missions": len(missions) - completed,
            "completed_missions": completed,
            "completion_rate": completed / len(missions) if missions else 0.0,
            "missions_per_vehicle_kind": per_kind,
            "obstacles": obstacles,
            "cargo_weight": {},
        }

        if missions:
            weights = np.asarray([m.cargo_weight for m in missions], dtype=float)
            stats["cargo_weight"] = {
                "min": float(weights.min()),
                "max": float(weights.max()),
                "avg": float(weights.mean()),
            }

        return stats

    def print_summary(self, console: Optional[Console] = None):
        """Print the statistics and mission table on a rich console."""
        console = console or CONSOLE
        stats = self.get_statistics()

        overview = Table(title="FLEET SUMMARY", show_header=False)
        overview.add_column("Metric", style="bold")
        overview.add_column("Value", justify="right")
        overview.add_row("Vehicles", str(stats["num_vehicles"]))
        overview.add_row("Missions", str(stats["num_missions"]))
        overview.add_row("Active", str(stats["active_missions"]))
        overview.add_row("Completed", str(stats["completed_missions"]))
        overview.add_row("Completion rate", f"{stats['completion_rate'] * 100:.1f}%")
        for domain, count in stats["obstacles"].items():
            overview.add_row(f"{domain.capitalize()} obstacles", str(count))
        console.print(overview)

        rows = self.mission_rows()
        if not rows:
            console.print("No missions recorded.")
            return

        missions = Table(title="Missions")
        for column in ("id", "origin", "destination", "vehicle_id", "mission_kind", "completed", "obstacle"):
            missions.add_column(column)
        for row in rows:
            missions.add_row(
                str(row["id"]),
                escape(row["origin"]),
                escape(row["destination"]),
                escape(row["vehicle_id"]),
                str(row["mission_kind"]),
                "yes" if row["completed"] else "no",
                row["obstacle"] or "-",
            )
        console.print(missions)

    def export_to_json(self, filepath: str):
        """
        Export the statistics and mission rows to a JSON file.

        Args:
            filepath: Path to output JSON file
        """
        data = {
            "statistics": self.get_statistics(),
            "missions": self.mission_rows(),
        }

        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)

    def visualize(self, save_path: Optional[str] = None):
        """
        Bar chart of missions per vehicle kind, split into completed and active.

        Args:
            save_path: Path to save the figure (if None, displays interactively)

        Returns:
            The matplotlib Figure, or None when there is nothing to plot
        """
        frame = self.mission_frame()
        if frame.empty:
            CONSOLE.print("No missions to visualize.")
            return None

        counts = (
            frame.groupby(["vehicle_kind", "completed"]).size().unstack(fill_value=0)
            .reindex(index=[kind.label for kind in VehicleKind], columns=[True, False], fill_value=0)
            .rename(columns={True: "Completed", False: "Active"})
        )

        fig, ax = plt.subplots(figsize=(8, 5))
        positions = np.arange(len(counts.index))
        ax.bar(positions, counts["Completed"], label="Completed", color="tab:green", alpha=0.8)
        ax.bar(positions, counts["Active"], bottom=counts["Completed"], label="Active", color="tab:orange", alpha=0.8)
        ax.set_xticks(positions)
        ax.set_xticklabels(counts.index)
        ax.set_ylabel("Missions")
        ax.set_title("Missions per vehicle type")
        ax.legend()
        ax.grid(True, axis="y", alpha=0.3)

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches="tight")
            plt.close(fig)
            CONSOLE.print(f"Visualization saved to {escape(save_path)}")
        else:
            plt.show()
        return fig
