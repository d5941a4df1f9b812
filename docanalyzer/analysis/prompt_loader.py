from pathlib import Path

from docanalyzer.analysis.exceptions import AnalysisError
from docanalyzer.analysis.models import AnalysisType

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(analysis_type: AnalysisType, prompt_dir: Path | None = None) -> str:
    """Load the system instruction for one analysis type.

    Args:
        analysis_type: Selects ``<analysis_type>.txt``.
        prompt_dir: Directory holding the prompt files.
                    Defaults to the bundled prompts directory.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    directory = prompt_dir if prompt_dir is not None else _DEFAULT_PROMPT_DIR
    path = directory / f"{analysis_type.value}.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load system prompt: {exc}") from exc
