"""
Async helpers for running the external download and transcode executables.

Commands are always passed as argument vectors, never through a shell.
"""

import os
import asyncio
import signal
from dataclasses import dataclass
from typing import List, Optional, Sequence

from clipper.utils.error_handling import ExternalProcessError
from clipper.utils.logger import logging

DEFAULT_LIMIT = 2 ** 16


@dataclass
class CommandResult:
    args: List[str]
    returncode: int
    stdout: bytes
    stderr: bytes


@dataclass
class PipelineResult:
    producer: CommandResult
    consumer: CommandResult


def _tail(data: Optional[bytes], lines: int = 5) -> str:
    if not data:
        return ""
    text = data.decode("utf-8", errors="replace").strip()
    return "\n".join(text.splitlines()[-lines:])


def _closed_by_consumer(returncode: int, stderr: Optional[bytes]) -> bool:
    """True when a producer exit was caused by its reader closing the pipe."""
    if returncode == -getattr(signal, "SIGPIPE", 13):
        return True
    return b"broken pipe" in (stderr or b"").lower()


async def _spawn(args: Sequence[str], **kwargs) -> asyncio.subprocess.Process:
    try:
        return await asyncio.create_subprocess_exec(*args, **kwargs)
    except FileNotFoundError as e:
        raise ExternalProcessError(f"Executable not found: {args[0]}") from e


async def _reap(*processes: asyncio.subprocess.Process) -> None:
    for process in processes:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
        await process.wait()


async def run_command(args: Sequence[str], timeout: float, limit: int = DEFAULT_LIMIT) -> CommandResult:
    """
    Run a command to completion and capture its output.

    Args:
        args: Executable followed by its arguments
        timeout: Wall-clock limit in seconds
        limit: Stream buffer limit for the captured pipes

    Returns:
        CommandResult of a zero exit

    Raises:
        ExternalProcessError: on timeout, missing executable or non-zero exit
    """
    args = [str(a) for a in args]
    logging.debug(f"Running: {' '.join(args)}")

    process = await _spawn(
        args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        limit=limit,
    )
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        await _reap(process)
        raise ExternalProcessError(f"{args[0]} timed out after {timeout}s")

    if process.returncode != 0:
        stderr_tail = _tail(stderr)
        raise ExternalProcessError(
            f"{args[0]} exited with code {process.returncode}: {stderr_tail}",
            returncode=process.returncode,
            stderr=stderr_tail,
        )

    return CommandResult(args, process.returncode, stdout, stderr)


async def run_piped(
    producer_args: Sequence[str],
    consumer_args: Sequence[str],
    timeout: float,
    limit: int = DEFAULT_LIMIT,
) -> PipelineResult:
    """
    Run two commands with the producer's stdout connected to the consumer's stdin.

    Both exit codes are checked. A producer that dies on its own (network error,
    unavailable video) fails the pipeline even when the consumer exits cleanly on
    the truncated input. A producer that only failed because the consumer closed
    the pipe early (SIGPIPE or a "Broken pipe" error once ffmpeg has read enough)
    is logged and tolerated.

    Raises:
        ExternalProcessError: on timeout, missing executable or either failure
    """
    producer_args = [str(a) for a in producer_args]
    consumer_args = [str(a) for a in consumer_args]
    logging.debug(f"Running: {' '.join(producer_args)} | {' '.join(consumer_args)}")

    read_fd, write_fd = os.pipe()
    try:
        producer = await _spawn(producer_args, stdout=write_fd, stderr=asyncio.subprocess.PIPE, limit=limit)
        try:
            consumer = await _spawn(
                consumer_args,
                stdin=read_fd,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
                limit=limit,
            )
        except ExternalProcessError:
            await _reap(producer)
            raise
    finally:
        # The children hold their own copies of both ends
        os.close(read_fd)
        os.close(write_fd)

    try:
        (_, producer_err), (_, consumer_err) = await asyncio.wait_for(
            asyncio.gather(producer.communicate(), consumer.communicate()),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        await _reap(producer, consumer)
        raise ExternalProcessError(f"{producer_args[0]} | {consumer_args[0]} timed out after {timeout}s")

    if consumer.returncode != 0:
        stderr_tail = _tail(consumer_err)
        raise ExternalProcessError(
            f"{consumer_args[0]} exited with code {consumer.returncode} "
            f"({producer_args[0]} exited with code {producer.returncode}): {stderr_tail}",
            returncode=consumer.returncode,
            stderr=stderr_tail or _tail(producer_err),
        )
    if producer.returncode != 0:
        if not _closed_by_consumer(producer.returncode, producer_err):
            stderr_tail = _tail(producer_err)
            raise ExternalProcessError(
                f"{producer_args[0]} exited with code {producer.returncode}: {stderr_tail}",
                returncode=producer.returncode,
                stderr=stderr_tail,
            )
        logging.warning(
            f"{producer_args[0]} stopped after {consumer_args[0]} closed the pipe: {_tail(producer_err, 1)}"
        )

    return PipelineResult(
        producer=CommandResult(producer_args, producer.returncode, b"", producer_err),
        consumer=CommandResult(consumer_args, consumer.returncode, b"", consumer_err),
    )
