"""Console messages for each exercise.

The text matches the classic exercises word for word, so output stays
comparable with them.
"""

from __future__ import annotations

from file_exercises.types import (
    ClassifyResult,
    CreateFileResult,
    CreateOutcome,
    ExistenceResult,
    PermissionsResult,
    ReadResult,
    WriteResult,
)

CLASSIFY_PROMPT = "Digite um nome de arquivo/diretório"

FILE_NAME = "Nome do arquivo: {name}"
FILE_PATH = "Path: {path}"
ALREADY_EXISTS = "Arquivo já existe..."
EXISTS = "Arquivo já existe."
CREATE_ERROR = "Erro ao criar o arquivo..."

CREATED = "Arquivo criado com sucesso!"
GENERIC_ERROR = "Ocorreu um erro..."

READABLE = "O arquivo pode ser lido."
NOT_READABLE = "O arquivo não pode ser lido."
WRITABLE = "O arquivo pode ser escrito."
NOT_WRITABLE = "O arquivo não pode ser escrito."

IS_FILE = "Você digitou o nome de um arquivo."
IS_DIRECTORY = "Você digitou o nome de um diretório."

WRITE_ERROR = "Ocorreu um erro ao escrever no arquivo..."
# Typo kept so output matches the classic exercise
READ_ERROR = "Oocorreu um erro..."


def _created_lines(result: CreateFileResult) -> list[str]:
    return [
        FILE_NAME.format(name=result.target.name),
        FILE_PATH.format(path=result.target.full_path),
    ]


def render_create(result: CreateFileResult) -> list[str]:
    if result.outcome is CreateOutcome.CREATED:
        return _created_lines(result)
    if result.outcome is CreateOutcome.ALREADY_EXISTS:
        return [ALREADY_EXISTS]
    return [CREATE_ERROR]


def render_existence(result: ExistenceResult) -> list[str]:
    """Render a creation attempt followed by the existence check.

    Unlike render_create, nothing is printed when the file was already
    there; the existence line covers that case.
    """
    lines: list[str] = []
    if result.creation.created:
        lines.extend(_created_lines(result.creation))
    elif not result.creation.success:
        lines.append(CREATE_ERROR)
    if result.exists:
        lines.append(EXISTS)
    return lines


def render_prepare(result: CreateFileResult) -> list[str]:
    if result.outcome is CreateOutcome.CREATED:
        return [CREATED, result.target.name]
    if result.outcome is CreateOutcome.ALREADY_EXISTS:
        return [ALREADY_EXISTS]
    return [GENERIC_ERROR, result.detail or ""]


def render_permissions(result: PermissionsResult) -> list[str]:
    return [
        READABLE if result.readable else NOT_READABLE,
        WRITABLE if result.writable else NOT_WRITABLE,
    ]


def render_classify(result: ClassifyResult) -> list[str]:
    lines = []
    if result.is_file:
        lines.append(IS_FILE)
    if result.is_directory:
        lines.append(IS_DIRECTORY)
    return lines


def render_write(result: WriteResult) -> list[str]:
    return [] if result.success else [WRITE_ERROR]


def render_read(result: ReadResult) -> list[str]:
    """Render the end of a read; the lines themselves are printed as read."""
    return [] if result.success else [READ_ERROR]
