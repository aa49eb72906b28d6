"""
Folio Preview
=============
Headless run of the backdrop for a given device: classification, selected
quality profile, and N frames of the composer on a virtual clock.

Usage:
    python -m folio.preview --user-agent "Mozilla/5.0 (iPhone ...)"
    python -m folio.preview --cores 8 --memory 16 --dpr 3 --frames 240
    python -m folio.preview --host                # sample this machine
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from folio.config import IDLE_TIMEOUT_MS
from folio.core.device import (
    EnvironmentSignals,
    HostSignalSource,
    SignalSource,
    StaticSignalSource,
)
from folio.core.quality import QualityProfile
from folio.scene import ComposerState, SceneComposer
from folio.scheduling import VirtualClock
from folio.surface import HeadlessSurface


@dataclass
class PreviewResult:
    signals: EnvironmentSignals
    profile: QualityProfile
    final_state: ComposerState
    states: list[str]
    frames_rendered: int
    scene_updates: int
    background_rotation: tuple[float, float, float] | None
    accent_rotation: tuple[float, float, float] | None
    fade_complete: bool
    opacity: float


def run_preview(
    source: SignalSource,
    frames: int = 120,
    fps: float = 60.0,
    seed: int | None = 42,
    idle_after_ms: float | None = 16.0,
) -> PreviewResult:
    """Mount a composer, let the host go idle once, then render `frames` frames.

    idle_after_ms=None simulates a host that never reports idle (deadline path).
    """
    clock = VirtualClock()
    surface = HeadlessSurface()
    composer = SceneComposer(clock, surface, source, rng=np.random.default_rng(seed))
    states = [composer.state.value]
    composer.on_state_change(lambda old, new: states.append(new.value))

    composer.mount()
    if idle_after_ms is not None:
        clock.advance(idle_after_ms)
        clock.signal_idle()
    else:
        clock.advance(IDLE_TIMEOUT_MS)

    frame_ms = 1000.0 / fps
    for _ in range(frames):
        clock.advance(frame_ms)
        surface.tick(frame_ms / 1000.0)

    scene = composer.scene
    result = PreviewResult(
        signals=composer.signals,
        profile=composer.profile,
        final_state=composer.state,
        states=states,
        frames_rendered=surface.frames,
        scene_updates=scene.frames if scene else 0,
        background_rotation=scene.background.rotation.as_tuple() if scene else None,
        accent_rotation=scene.accent.rotation.as_tuple() if scene and scene.accent else None,
        fade_complete=composer.fade_complete,
        opacity=surface.opacity,
    )
    composer.unmount()
    return result


def _on_off(flag: bool) -> str:
    return "[green]on[/green]" if flag else "[dim]off[/dim]"


def _fmt_rotation(rot: tuple[float, float, float] | None) -> str:
    if rot is None:
        return "—"
    return f"x={rot[0]:+.3f}  y={rot[1]:+.3f}  z={rot[2]:+.3f}"


def render_profile_panel(result: PreviewResult) -> Panel:
    """Signals + profile as a borderless label/value table."""
    sig = result.signals
    prof = result.profile

    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
    table.add_column("label", style="dim", justify="right", min_width=14)
    table.add_column("value", justify="left")

    # — Signals —
    table.add_row("User agent", sig.user_agent or "—")
    table.add_row("Cores", str(sig.hardware_concurrency) if sig.hardware_concurrency is not None else "—")
    table.add_row("Memory", f"{sig.device_memory} GB" if sig.device_memory is not None else "[dim]not reported[/dim]")
    table.add_row("Pixel ratio", str(sig.device_pixel_ratio) if sig.device_pixel_ratio is not None else "—")

    table.add_row("", "")  # section separator

    # — Profile —
    tier_style = "yellow" if prof.is_constrained else "green"
    table.add_row("Tier", f"[{tier_style}]{prof.tier.value}[/{tier_style}]")
    table.add_row("Particles", f"{prof.particle_count:,} + {prof.foreground_particle_count:,}")
    table.add_row("Size", f"{prof.particle_size}")
    table.add_row("Accent shape", _on_off(prof.enable_accent_shape))
    table.add_row("Float motion", _on_off(prof.enable_float_motion))
    table.add_row("Lighting", _on_off(prof.enable_dynamic_lighting))
    table.add_row("Fog", _on_off(prof.enable_fog))
    table.add_row("Frame skip", str(prof.frame_skip))
    table.add_row("DPR cap", f"{prof.pixel_ratio_cap:.1f}")

    return Panel(table, title="[bold]Quality profile[/bold]", border_style="cyan")


def render_run_panel(result: PreviewResult) -> Panel:
    table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
    table.add_column("label", style="dim", justify="right", min_width=14)
    table.add_column("value", justify="left")

    table.add_row("States", " → ".join(result.states))
    table.add_row("Frames", f"{result.frames_rendered} rendered / {result.scene_updates} updated")
    if result.background_rotation is None:
        table.add_row("Scene", "[yellow]static fallback[/yellow]")
    else:
        table.add_row("Field spin", _fmt_rotation(result.background_rotation))
        table.add_row("Accent spin", _fmt_rotation(result.accent_rotation))
        fade = "[green]done[/green]" if result.fade_complete else "in progress"
        table.add_row("Opacity", f"{result.opacity:.1f} (fade {fade})")

    return Panel(table, title="[bold]Run[/bold]", border_style="cyan")


def main():
    """CLI entry point for the headless preview."""
    import argparse

    parser = argparse.ArgumentParser(description="Folio Preview — headless backdrop run")
    parser.add_argument("--user-agent", type=str, default="Mozilla/5.0 (X11; Linux x86_64)")
    parser.add_argument("--cores", type=int, default=8)
    parser.add_argument("--memory", type=float, default=None, help="Device memory in GB (omit = not reported)")
    parser.add_argument("--dpr", type=float, default=1.0, help="Device pixel ratio")
    parser.add_argument("--host", action="store_true", help="Sample this machine instead of the flags")
    parser.add_argument("--frames", type=int, default=120)
    parser.add_argument("--fps", type=float, default=60.0)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--no-idle", action="store_true", help="Host never reports idle (deadline path)")
    args = parser.parse_args()

    if args.host:
        source: SignalSource = HostSignalSource()
    else:
        source = StaticSignalSource(EnvironmentSignals(
            user_agent=args.user_agent,
            hardware_concurrency=args.cores,
            device_memory=args.memory,
            device_pixel_ratio=args.dpr,
        ))

    result = run_preview(
        source,
        frames=args.frames,
        fps=args.fps,
        seed=args.seed,
        idle_after_ms=None if args.no_idle else 16.0,
    )

    console = Console()
    console.print(render_profile_panel(result))
    console.print(render_run_panel(result))


if __name__ == "__main__":
    main()
