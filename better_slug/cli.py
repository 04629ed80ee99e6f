"""Command-line interface for better-slug.

Responsibilities:
- Expose user-facing commands for single, batch and interactive slugging.
- Resolve options with precedence: CLI flags > YAML file > environment > defaults.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from .cli_rendering import (
    echo_benchmark,
    echo_command_error,
    echo_detection,
    echo_locale_rows,
    echo_result,
    exit_with_command_error,
    render_results,
)
from .config import ConfigLoader, SlugConfig, merge_option_layers
from .locales import get_language_info, has_charmap, supported_locales
from .pipeline import SlugEngine
from .telemetry.logger import RunLogger
from .telemetry.timing import StepTimer
from .text.detection import LanguageDetector

app = typer.Typer(
    name="better-slug",
    no_args_is_help=True,
    help="better-slug CLI.",
)

_INTERACTIVE_EXIT_WORDS = frozenset({"exit", "quit"})
_INTERACTIVE_ALIASES = {"case": "case_style", "unique": "uniqueness"}

LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", "-l", help="Locale code, `auto`, or `preserve`."),
]
SeparatorOption = Annotated[
    str | None, typer.Option("--separator", "-s", help="Word separator (may be empty).")
]
CaseOption = Annotated[
    str | None,
    typer.Option(
        "--case",
        help="Case style: `lower`, `upper`, `title`, `sentence`, `camel`, `pascal`, `preserve`.",
    ),
]
ModeOption = Annotated[
    str | None,
    typer.Option(
        "--mode", "-m", help="Mode: `normal`, `strict`, `pretty`, `rfc3986`, `filename`, `id`."
    ),
]
EmojisOption = Annotated[
    str | None,
    typer.Option("--emojis", help="Emoji handling: `remove`, `name`, `unicode`, `preserve`."),
]
MaxLengthOption = Annotated[
    int | None, typer.Option("--max-length", help="Maximum slug length; `0` disables the limit.")
]
TruncateOption = Annotated[
    str | None, typer.Option("--truncate", help="Truncation strategy: `char`, `word`, `smart`.")
]
PreserveOption = Annotated[
    list[str] | None,
    typer.Option("--preserve", help="Literal substring kept verbatim. Repeatable."),
]
RemoveOption = Annotated[
    list[str] | None,
    typer.Option("--remove", help="Literal substring deleted from the slug. Repeatable."),
]
RemoveStopWordsOption = Annotated[
    bool, typer.Option("--remove-stop-words", help="Drop stop words of the active locale.")
]
StopWordLocaleOption = Annotated[
    list[str] | None,
    typer.Option("--stop-word-locale", help="Stop-word locale to use. Repeatable."),
]
TransliterateOption = Annotated[
    bool | None,
    typer.Option("--transliterate/--no-transliterate", help="Toggle transliteration to Latin."),
]
DetectLanguageOption = Annotated[
    bool | None,
    typer.Option("--detect-language/--no-detect-language", help="Detect the input script."),
]
UniqueOption = Annotated[
    str | None,
    typer.Option("--unique", help="Uniqueness strategy: `counter`, `hash`, `timestamp`, `random`."),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with option defaults."),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON records.")]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log pipeline steps to stderr.")
]
BenchmarkOption = Annotated[
    bool, typer.Option("--benchmark", help="Print timing stats to stderr.")
]


class BatchProgressIndicator:
    """Render deterministic per-item progress lines on stderr."""

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_item_complete(self, done: int, total: int) -> None:
        """Print one progress line for a finished item."""

        typer.echo(f"[progress] command={self._command_name} {done}/{total}", err=True)


def _load_yaml_options(config_path: Path | None) -> dict[str, Any]:
    """Load YAML option overrides when requested and describe failures."""

    if config_path is None:
        return {}
    try:
        return ConfigLoader.options_from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: `{config_path}`.") from exc
    except OSError as exc:
        raise ValueError(f"Failed to read config file `{config_path}`: {exc}") from exc


def _cli_option_layer(**values: Any) -> dict[str, Any]:
    """Translate provided CLI values into normalized option overrides."""

    stop_word_locales = values.pop("stop_word_locales", None)
    remove_stop_words = values.pop("remove_stop_words", False)
    raw = {key: value for key, value in values.items() if value is not None and value != []}
    if stop_word_locales:
        raw["remove_stop_words"] = list(stop_word_locales)
    elif remove_stop_words:
        raw["remove_stop_words"] = True
    return ConfigLoader.options_from_mapping(raw, source_label="CLI options")


def _resolve_config(config_file: Path | None, cli_layer: dict[str, Any]) -> SlugConfig:
    """Merge environment, YAML and CLI layers into a validated config."""

    options = merge_option_layers(
        ConfigLoader.options_from_env(),
        _load_yaml_options(config_file),
        cli_layer,
    )
    return SlugConfig.from_options(**options)


def _read_stdin_text() -> str:
    """Read all of stdin, dropping one trailing newline."""

    text = typer.get_text_stream("stdin").read()
    return text[:-1] if text.endswith("\n") else text


def _read_batch_inputs(input_file: Path | None) -> list[str]:
    """Read one input per non-blank line from a file or stdin."""

    if input_file is None:
        raw_text = typer.get_text_stream("stdin").read()
    else:
        raw_text = input_file.read_text(encoding="utf-8")
    return [line for line in raw_text.splitlines() if line.strip()]


@app.command("slug")
def slug_command(
    text: Annotated[
        list[str] | None,
        typer.Argument(
            help="Text to slugify; words are joined with spaces. Reads stdin when omitted."
        ),
    ] = None,
    locale: LocaleOption = None,
    separator: SeparatorOption = None,
    case: CaseOption = None,
    mode: ModeOption = None,
    emojis: EmojisOption = None,
    max_length: MaxLengthOption = None,
    truncate: TruncateOption = None,
    preserve: PreserveOption = None,
    remove: RemoveOption = None,
    remove_stop_words: RemoveStopWordsOption = False,
    stop_word_locale: StopWordLocaleOption = None,
    transliterate: TransliterateOption = None,
    detect_language: DetectLanguageOption = None,
    unique: UniqueOption = None,
    config_file: ConfigFileOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
    benchmark: BenchmarkOption = False,
) -> None:
    """Slugify one text."""

    try:
        config = _resolve_config(
            config_file,
            _cli_option_layer(
                locale=locale,
                separator=separator,
                case_style=case,
                mode=mode,
                emojis=emojis,
                max_length=max_length,
                truncate=truncate,
                preserve=preserve,
                remove=remove,
                remove_stop_words=remove_stop_words,
                stop_word_locales=stop_word_locale,
                transliterate=transliterate,
                detect_language=detect_language,
                uniqueness=unique,
            ),
        )
        run_logger = RunLogger(level="DEBUG") if verbose else None
        engine = SlugEngine(config, run_logger=run_logger)
        source = " ".join(text) if text else _read_stdin_text()
        timer = StepTimer()
        result = timer.measure("slugify", lambda: engine.slugify(source))
    except Exception as exc:
        exit_with_command_error("slug", exc)

    echo_result(result, as_json=as_json)
    if benchmark:
        echo_benchmark("slugify", timer.stats("slugify"))


@app.command("batch")
def batch_command(
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--file", "-f", help="File with one input per line. Reads stdin when omitted."
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write results to this file instead of stdout."),
    ] = None,
    locale: LocaleOption = None,
    separator: SeparatorOption = None,
    case: CaseOption = None,
    mode: ModeOption = None,
    max_length: MaxLengthOption = None,
    unique: UniqueOption = None,
    config_file: ConfigFileOption = None,
    as_json: JsonOption = False,
    progress: Annotated[
        bool, typer.Option("--progress", help="Print per-item progress to stderr.")
    ] = False,
    benchmark: BenchmarkOption = False,
) -> None:
    """Slugify every non-blank line of a file or stdin."""

    try:
        config = _resolve_config(
            config_file,
            _cli_option_layer(
                locale=locale,
                separator=separator,
                case_style=case,
                mode=mode,
                max_length=max_length,
                uniqueness=unique,
            ),
        )
        engine = SlugEngine(config)
        inputs = _read_batch_inputs(input_file)
        indicator = BatchProgressIndicator(command_name="batch") if progress else None
        timer = StepTimer()
        results = timer.measure(
            "batch",
            lambda: engine.slugify_batch(
                inputs,
                progress=indicator.on_item_complete if indicator is not None else None,
            ),
        )
        rendered = render_results(results, as_json=as_json)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(rendered + "\n" if rendered else "", encoding="utf-8")
    except Exception as exc:
        exit_with_command_error("batch", exc)

    if output is None:
        if rendered:
            typer.echo(rendered)
    else:
        typer.echo(f"Wrote {len(results)} slug(s) to {output}")
    if benchmark:
        echo_benchmark("batch", timer.stats("batch"))


@app.command("detect")
def detect_command(
    text: Annotated[list[str], typer.Argument(help="Text to inspect.")],
    as_json: JsonOption = False,
) -> None:
    """Print the detected locale and writing direction of a text."""

    detector = LanguageDetector()
    source = " ".join(text)
    echo_detection(detector.detect(source), detector.is_rtl(source), as_json=as_json)


@app.command("locales")
def locales_command() -> None:
    """List supported locales and which ones ship a character map."""

    rows = []
    for code in supported_locales():
        info = get_language_info(code)
        if info is not None:
            rows.append((info, has_charmap(code)))
    echo_locale_rows(rows)


@app.command("interactive")
def interactive_command(
    locale: LocaleOption = None,
    config_file: ConfigFileOption = None,
) -> None:
    """Slugify lines read from stdin until `exit` or `quit`.

    `set <option> <value>` updates one option for the following lines.
    """

    try:
        engine = SlugEngine(_resolve_config(config_file, _cli_option_layer(locale=locale)))
    except Exception as exc:
        exit_with_command_error("interactive", exc)

    typer.echo("Type text to slugify, `set <option> <value>` to change options, `exit` to quit.")
    for raw_line in typer.get_text_stream("stdin"):
        line = raw_line.strip()
        if not line:
            continue
        if line.lower() in _INTERACTIVE_EXIT_WORDS:
            break
        try:
            if line.startswith("set "):
                _apply_interactive_setting(engine, line[4:])
            else:
                typer.echo(engine.slugify(line).slug)
        except ValueError as exc:
            echo_command_error("interactive", exc)


def _apply_interactive_setting(engine: SlugEngine, assignment: str) -> None:
    """Parse `<option> <value>` and apply it to the engine."""

    name, _, value = assignment.strip().partition(" ")
    if not name or not value:
        raise ValueError("Usage: set <option> <value>")
    key = name.replace("-", "_").lower()
    key = _INTERACTIVE_ALIASES.get(key, key)
    options = ConfigLoader.options_from_mapping({key: value.strip()}, source_label="interactive")
    engine.update_options(**options)
    typer.echo(f"{key} updated")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
