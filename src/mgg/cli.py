"""CLI entry point for the motion graphics generator."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .defaults import default_video
from .models import AspectRatio, VideoConfig

app = typer.Typer(
    name="mg-maker",
    help="AI-powered motion graphics generator",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mg-maker version {__version__}")
        raise typer.Exit()


def _load_video(config_path: Path, use_default: bool) -> VideoConfig:
    """Load a video config, or the built-in demo when requested."""
    if use_default:
        return default_video()

    if not config_path.exists():
        typer.echo(f"❌ No video config found at {config_path}")
        typer.echo("   Run 'mg-maker generate' to create one, or pass --default")
        raise typer.Exit(1)

    try:
        return VideoConfig.load(config_path)
    except Exception as e:
        typer.echo(f"❌ Error loading video config: {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Motion Graphics Generator - Turn topics into animated explainers."""
    pass


@app.command()
def status(
    config_path: Path = typer.Option(
        Path("video.yaml"),
        "--config",
        "-c",
        help="Path to the video config (YAML or JSON)",
    ),
    use_default: bool = typer.Option(
        False,
        "--default",
        help="Use the built-in Redis lock demo"
    ),
) -> None:
    """Show a summary of a video config."""
    video = _load_video(config_path, use_default)

    typer.echo(f"📁 Topic: {video.topic or '(untitled)'}")
    if video.music_mood:
        typer.echo(f"   Music mood: {video.music_mood}")
    typer.echo(f"   Canvas: {video.width}x{video.height} @ {video.fps}fps")
    typer.echo(f"   Scenes: {len(video.scenes)}")
    typer.echo(
        f"   Total duration: {video.total_duration_frames} frames "
        f"({video.duration_seconds:.1f}s)"
    )

    typer.echo("\n📽️  Scenes:")
    for index, scene in enumerate(video.scenes):
        typer.echo(
            f"   [{index + 1}] {scene.type.value}: {scene.title} "
            f"({scene.duration_in_frames} frames)"
        )
        if scene.is_diagram:
            diagram = scene.diagram
            typer.echo(
                f"      → {len(diagram.nodes)} nodes, {len(diagram.edges)} edges, "
                f"{len(diagram.actions)} actions"
            )


@app.command()
def generate(
    topic: str = typer.Argument(
        ...,
        help="What the video is about"
    ),
    duration: int = typer.Option(
        15,
        "--duration",
        "-d",
        help="Target duration in seconds",
        min=5,
        max=600
    ),
    aspect_ratio: AspectRatio = typer.Option(
        AspectRatio.SQUARE,
        "--aspect-ratio",
        "-a",
        help="Canvas aspect ratio"
    ),
    fps: Optional[int] = typer.Option(
        None,
        "--fps",
        help="Frames per second (defaults to MGG_FPS or 30)",
        min=1
    ),
    output: Path = typer.Option(
        Path("video.yaml"),
        "--output",
        "-o",
        help="Output config path (.yaml or .json)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Generate a video script for a topic using AI."""
    from .agents import ScriptAgent, ScriptInput, build_video_config

    setup_logging(verbose)
    typer.echo(f"🎬 Generating: {topic}")
    typer.echo(f"   Target duration: {duration}s")
    typer.echo(f"   Aspect ratio: {aspect_ratio.value}")

    try:
        config.validate_required()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    input_data = ScriptInput(
        topic=topic,
        duration_seconds=duration,
        aspect_ratio=aspect_ratio,
        fps=fps or config.default_fps,
    )

    try:
        agent = ScriptAgent()
        typer.echo(f"   Using model: {agent.model}")
        typer.echo("   Writing script...")
        script = agent.run(input_data)
    except Exception as e:
        typer.echo(f"❌ Error generating script: {e}")
        raise typer.Exit(1)

    video = build_video_config(script, input_data)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        video.save(output)
        typer.echo(f"\n✅ Video config saved: {output}")
    except Exception as e:
        typer.echo(f"❌ Error saving video config: {e}")
        raise typer.Exit(1)

    typer.echo(f"\n📋 Summary:")
    typer.echo(f"   Scenes: {len(video.scenes)}")
    typer.echo(f"   Music mood: {video.music_mood}")
    typer.echo(f"   Total duration: {video.duration_seconds:.1f}s")

    typer.echo(f"\n📽️  Scene breakdown:")
    for scene in video.scenes:
        typer.echo(f"   • {scene.type.value}: {scene.title} ({scene.duration_in_frames} frames)")


@app.command()
def frame(
    frame_number: int = typer.Argument(
        ...,
        help="Global frame index to describe"
    ),
    config_path: Path = typer.Option(
        Path("video.yaml"),
        "--config",
        "-c",
        help="Path to the video config (YAML or JSON)",
    ),
    use_default: bool = typer.Option(
        False,
        "--default",
        help="Use the built-in Redis lock demo"
    ),
    theme: str = typer.Option(
        "tech",
        "--theme",
        "-t",
        help="Diagram theme (tech, neon)"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the description to a file instead of stdout"
    ),
) -> None:
    """Print the render description of one frame as JSON."""
    from .motion import get_theme, render_frame

    video = _load_video(config_path, use_default)

    try:
        diagram_theme = get_theme(theme)
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    description = render_frame(video, frame_number, theme=diagram_theme)
    payload = description.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload)
        typer.echo(f"✅ Frame {frame_number} written: {output}")
    else:
        typer.echo(payload)


@app.command()
def export(
    config_path: Path = typer.Option(
        Path("video.yaml"),
        "--config",
        "-c",
        help="Path to the video config (YAML or JSON)",
    ),
    use_default: bool = typer.Option(
        False,
        "--default",
        help="Use the built-in Redis lock demo"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON path (defaults to animation-<topic>.json)"
    ),
) -> None:
    """Export a video config as JSON."""
    video = _load_video(config_path, use_default)
    target = output or Path(video.export_filename())

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        video.to_json(target)
    except Exception as e:
        typer.echo(f"❌ Error exporting video config: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Exported: {target}")


if __name__ == "__main__":
    app()
