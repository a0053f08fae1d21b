"""Questionnaire document parser with Pydantic validation and line number extraction"""
import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar

import aiofiles
import yaml
from pydantic import TypeAdapter, ValidationError
from ruamel.yaml import YAML

from ..exceptions import DataLoadError
from ..models.documents import AppConfig, Program, QuestionsDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PROGRAMS_ADAPTER = TypeAdapter(List[Program])


@dataclass
class LoadedDocuments:
    """Documents needed to construct an engine"""
    questions: QuestionsDocument
    programs: List[Program] = field(default_factory=list)
    config: AppConfig = field(default_factory=AppConfig)


class DocumentParser:
    """Parser for questions, programs and config documents (YAML or JSON)"""

    def __init__(self):
        self._ruamel_yaml = YAML()
        self._ruamel_yaml.preserve_quotes = True

    async def parse_questions(self, path: Path) -> QuestionsDocument:
        """Parse and validate the questions document

        Raises:
            DataLoadError: If reading, parsing or validation fails
        """
        text, data = await self._read(path)
        return self._validate(QuestionsDocument.model_validate, data, path, text)

    async def parse_programs(self, path: Path) -> List[Program]:
        """Parse and validate the programs document

        Accepts a bare list or a mapping with a 'programs' list.
        """
        text, data = await self._read(path)
        if isinstance(data, dict) and "programs" in data:
            data = data["programs"]
        return self._validate(_PROGRAMS_ADAPTER.validate_python, data, path, text)

    async def parse_config(self, path: Path) -> AppConfig:
        """Parse and validate the config document"""
        text, data = await self._read(path)
        return self._validate(AppConfig.model_validate, data or {}, path, text)

    async def _read(self, path: Path):
        """Read a document and decode it according to its suffix"""
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                text = await f.read()
        except FileNotFoundError:
            raise DataLoadError("file not found", document_path=str(path))
        except UnicodeDecodeError as e:
            raise DataLoadError(f"invalid encoding: {e.reason}", document_path=str(path))
        except OSError as e:
            raise DataLoadError(f"error reading file: {e}", document_path=str(path))

        try:
            if path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except json.JSONDecodeError as e:
            raise DataLoadError(f"JSON parsing error: {e.msg}", str(path), e.lineno)
        except yaml.YAMLError as e:
            raise DataLoadError(
                f"YAML parsing error: {e}",
                str(path),
                self._extract_yaml_error_line(e)
            )

        logger.debug("Read document %s", path)
        return text, data

    def _validate(self, validate: Callable[[Any], T], data: Any, path: Path, text: str) -> T:
        try:
            return validate(data)
        except ValidationError as e:
            raise DataLoadError(
                f"invalid document: {self._format_validation_error(e)}",
                document_path=str(path),
                line_number=self._extract_line_number(text, e)
            )

    def _extract_yaml_error_line(self, error: yaml.YAMLError) -> Optional[int]:
        """Extract line number from YAML parsing error"""
        if hasattr(error, 'problem_mark') and error.problem_mark is not None:
            return error.problem_mark.line + 1
        return None

    def _extract_line_number(self, text: str, error: ValidationError) -> Optional[int]:
        """Extract line number from Pydantic validation error using ruamel.yaml

        Args:
            text: Raw document text
            error: Pydantic validation error

        Returns:
            Line number if found, None otherwise
        """
        if not error.errors():
            return None

        field_path = error.errors()[0].get('loc', ())
        if not field_path:
            return None

        try:
            current = self._ruamel_yaml.load(text)
        except Exception:
            # Line numbers are best effort
            return None

        # Navigate to the deepest node that still carries position info
        line = None
        for part in field_path:
            if isinstance(current, dict) and part in current:
                if hasattr(current, 'lc'):
                    line = current.lc.key(part)[0] + 1
                current = current[part]
            elif isinstance(current, list) and isinstance(part, int) and 0 <= part < len(current):
                if hasattr(current, 'lc'):
                    line = current.lc.item(part)[0] + 1
                current = current[part]
            else:
                break
        return line

    def _format_validation_error(self, error: ValidationError) -> str:
        """Format Pydantic validation error for user display"""
        errors = error.errors()
        if not errors:
            return str(error)

        first_error = errors[0]
        field_path = '.'.join(str(loc) for loc in first_error.get('loc', ()))
        message = first_error.get('msg', 'Validation failed')

        if field_path:
            return f"{field_path}: {message}"
        return message


async def load_documents_async(
    questions_path: Path,
    programs_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    parser: Optional[DocumentParser] = None
) -> LoadedDocuments:
    """Load all documents concurrently

    Programs and config are optional; without a config document feedback
    stays disabled.

    Raises:
        DataLoadError: If any document fails to load
    """
    parser = parser or DocumentParser()

    async def _none():
        return None

    questions, programs, config = await asyncio.gather(
        parser.parse_questions(questions_path),
        parser.parse_programs(programs_path) if programs_path else _none(),
        parser.parse_config(config_path) if config_path else _none()
    )

    return LoadedDocuments(
        questions=questions,
        programs=programs or [],
        config=config or AppConfig()
    )
