"""Re-apply a release with new values through ``helm upgrade``."""

from __future__ import annotations

import json
import logging
import subprocess
import tempfile
from pathlib import Path

import yaml

from helm_edit.config.settings import settings
from helm_edit.errors import UpgradeError
from helm_edit.models.chart import ChartFile, HelmChart
from helm_edit.models.release import HelmRelease
from helm_edit.utils.yaml_codec import marshal

logger = logging.getLogger(__name__)


def _write_file(root: Path, rel_name: str, data: bytes) -> None:
    target = (root / rel_name).resolve()
    if root.resolve() not in target.parents:
        raise UpgradeError(f"chart file '{rel_name}' escapes the chart directory")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


def write_chart(chart: HelmChart, dest: Path) -> Path:
    """Lay out a stored chart as a directory ``helm`` can install from.

    Subcharts are not kept in release storage, so declared dependencies
    are dropped from Chart.yaml rather than failing the dependency check.
    """
    if not chart.metadata.name:
        raise UpgradeError("stored release has no chart metadata")
    chart_dir = dest / chart.metadata.name
    chart_dir.mkdir(parents=True, exist_ok=True)

    metadata = dict(chart.metadata.raw)
    metadata.pop("dependencies", None)
    if chart.metadata.dependencies:
        logger.warning(
            "Chart %s declares dependencies; subcharts are not stored with the release "
            "and will be omitted from the upgrade",
            chart.metadata.name,
        )
    (chart_dir / "Chart.yaml").write_text(
        yaml.safe_dump(metadata, default_flow_style=False, sort_keys=False), encoding="utf-8",
    )
    (chart_dir / "values.yaml").write_text(marshal(chart.values), encoding="utf-8")
    if chart.schema:
        (chart_dir / "values.schema.json").write_bytes(chart.schema)

    files: list[ChartFile] = [*chart.templates, *chart.files]
    for f in files:
        _write_file(chart_dir, f.name, f.data)
    return chart_dir


def format_timeout(seconds: float) -> str:
    """Render seconds as a Go duration, falling back to ms for fractions."""
    if float(seconds).is_integer():
        return f"{int(seconds)}s"
    return f"{round(seconds * 1000)}ms"


class HelmUpgradeExecutor:
    """Upgrades a release in place with its stored chart and new overrides."""

    def __init__(self, kube_context: str | None = None, helm_bin: str | None = None):
        self.kube_context = kube_context
        self.helm_bin = helm_bin or settings.helm_bin

    def build_command(
        self,
        release: HelmRelease,
        chart_dir: Path,
        values_file: Path,
        wait: bool,
        timeout: float,
    ) -> list[str]:
        cmd = [
            self.helm_bin, "upgrade", release.name, str(chart_dir),
            "--values", str(values_file),
            "--reset-values",
            "--timeout", format_timeout(timeout),
            "--output", "json",
        ]
        if release.namespace:
            cmd += ["--namespace", release.namespace]
        if wait:
            cmd.append("--wait")
        if self.kube_context:
            cmd += ["--kube-context", self.kube_context]
        return cmd

    def upgrade(
        self,
        release: HelmRelease,
        overrides: dict,
        wait: bool = False,
        timeout: float = 300.0,
    ) -> HelmRelease:
        """Run the upgrade and return the new release revision."""
        with tempfile.TemporaryDirectory(prefix=settings.temp_prefix) as tmp:
            tmp_path = Path(tmp)
            chart_dir = write_chart(release.chart, tmp_path / "chart")
            values_file = tmp_path / "overrides.yaml"
            values_file.write_text(marshal(overrides), encoding="utf-8")

            cmd = self.build_command(release, chart_dir, values_file, wait, timeout)
            logger.info("Upgrading %s/%s", release.namespace or "-", release.name)
            logger.debug("Running: %s", " ".join(cmd))
            try:
                completed = subprocess.run(cmd, capture_output=True, text=True, check=False)
            except OSError as e:
                raise UpgradeError(f"cannot run '{self.helm_bin}': {e}") from e

        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout or "").strip()
            raise UpgradeError(f"helm upgrade failed: {detail}")
        try:
            payload = json.loads(completed.stdout)
        except json.JSONDecodeError as e:
            raise UpgradeError(f"unexpected output from helm upgrade: {e}") from e
        return HelmRelease.from_dict(payload, context=self.kube_context or "")
