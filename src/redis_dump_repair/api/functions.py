"""Module-level repair API.

These functions wire the byte cursor, tokenizer and repairer together for the
common cases: in-memory bytes, file-like objects and paths on disk. Unlike a
never-fail parser, every function here raises on malformed input; a partially
repaired dump is never reported as a success.
"""

import io
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from redis_dump_repair.character import SourceType
from redis_dump_repair.repair import DumpRepairer
from redis_dump_repair.shared import (
    DiagnosticSeverity,
    InputFileError,
    OutputFileError,
    RepairConfig,
    RepairResult,
    get_logger,
)
from redis_dump_repair.tokenization import DumpTokenizer, Token

PathType = Union[str, Path]


def tokenize(source: SourceType, config: Optional[RepairConfig] = None) -> List[Token]:
    """Tokenize a whole dump.

    Args:
        source: Dump content as bytes or a binary file-like object
        config: Optional repair configuration

    Returns:
        All STRING and NEWLINE tokens, in order

    Raises:
        TokenizationError: If the dump is malformed

    Examples:
        >>> [t.value for t in tokenize(b"del 'a b'\\n")]
        [b'del', b'a b', b'\\n']
    """
    return list(DumpTokenizer(source, config))


def repair(
    source: SourceType,
    sink: BinaryIO,
    config: Optional[RepairConfig] = None,
) -> RepairResult:
    """Repair a dump from ``source`` onto ``sink``.

    Args:
        source: Dump content as bytes or a binary file-like object
        sink: Binary file-like object receiving the repaired dump
        config: Optional repair configuration

    Returns:
        RepairResult with metrics for the completed pass

    Raises:
        TokenizationError: If the dump is malformed
        OSError: If reading the source or writing the sink fails
    """
    config = config or RepairConfig.default()
    logger = get_logger(__name__, config.correlation_id, "repair")

    repairer = DumpRepairer(DumpTokenizer(source, config), sink, config)
    metrics = repairer.run()

    logger.info(
        "Repaired dump",
        extra={
            "bytes_read": metrics.bytes_read,
            "bytes_written": metrics.bytes_written,
            "processing_time_ms": metrics.processing_time_ms,
        }
    )
    return _build_result(repairer, config)


def repair_bytes(data: bytes, config: Optional[RepairConfig] = None) -> bytes:
    """Repair an in-memory dump and return the repaired bytes.

    Examples:
        >>> repair_bytes(b"set foo 'bar baz'\\n")
        b'set      "foo" "bar baz"\\n'
    """
    sink = io.BytesIO()
    repair(data, sink, config)
    return sink.getvalue()


def repair_file(
    input_path: PathType,
    output_path: PathType,
    config: Optional[RepairConfig] = None,
) -> RepairResult:
    """Repair the dump at ``input_path`` into ``output_path``.

    The output file is created (or truncated) before tokenizing starts, so a
    malformed dump leaves a partial output file behind. Both files are closed
    on every path.

    Raises:
        InputFileError: If the input cannot be opened or read
        OutputFileError: If the output cannot be created or written
        TokenizationError: If the dump is malformed
    """
    config = config or RepairConfig.default()
    logger = get_logger(__name__, config.correlation_id, "repair_file")
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        input_file = input_path.open("rb")
    except OSError as e:
        raise InputFileError(input_path, e) from e

    with input_file:
        try:
            output_file = output_path.open("wb")
        except OSError as e:
            raise OutputFileError(output_path, e) from e

        logger.debug(
            "Repairing file",
            extra={"input": str(input_path), "output": str(output_path)}
        )
        tokenizer = DumpTokenizer(input_file, config)
        repairer = DumpRepairer(tokenizer, output_file, config)
        # A failing close is a write failure
        try:
            with output_file:
                repairer.run()
                output_file.flush()
        except OSError as e:
            if tokenizer.error is e:
                raise InputFileError(input_path, e, "reading input file") from e
            raise OutputFileError(output_path, e, "writing to output file") from e

    result = _build_result(repairer, config, output_path)
    logger.info("Repaired file", extra=result.summary())
    return result


def _build_result(
    repairer: DumpRepairer,
    config: RepairConfig,
    output_path: Optional[Path] = None,
) -> RepairResult:
    result = RepairResult(
        metrics=repairer.metrics,
        correlation_id=config.correlation_id,
        output_path=output_path,
    )
    if repairer.ended_mid_line:
        message = "Dump does not end with a newline"
        result.add_diagnostic(DiagnosticSeverity.WARNING, message, "repairer")
        get_logger(__name__, config.correlation_id, "repair").warning(message)
    return result
