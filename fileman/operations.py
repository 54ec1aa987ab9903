import asyncio
import logging
import os
import time

from .compression import (
    compress_file, decompress_file, compressed_name, decompressed_name,
)
from .validators import is_existing_file, is_existing_dir, path_exists


log = logging.getLogger(__name__)


async def compress(fm, source_file: str, dest_dir: str = "") -> None:
    """Compress ``source_file`` into ``<name>.zst`` with Zstandard

    The destination defaults to the file manager's current directory.
    Failures are reported through ``fm.ui``, never raised.
    """
    source_path = os.path.abspath(os.path.join(fm.current_dir, source_file))
    if not await is_existing_file(source_path):
        fm.ui.report("failed")
        fm.ui.report(f"No such file {source_path}")
        return

    dest_dir_path = fm.current_dir
    if dest_dir:
        dest_dir_path = os.path.abspath(os.path.join(dest_dir_path, dest_dir))
        if not await is_existing_dir(dest_dir_path):
            fm.ui.report("invalid")
            fm.ui.report(f"No such directory {dest_dir_path}")
            return

    dest_path = os.path.join(dest_dir_path, compressed_name(os.path.basename(source_path)))

    await _run_pipeline(
        fm, compress_file, source_path, dest_path,
        "Compressing, wait please...", "Compressing done: ",
    )


async def decompress(fm, source_file: str, dest_dir: str = "") -> None:
    """Decompress ``source_file`` into a file named without its last extension

    The destination defaults to the directory of the source file, and an
    explicit ``dest_dir`` is resolved against that same directory.
    """
    source_path = os.path.abspath(os.path.join(fm.current_dir, source_file))
    if not await is_existing_file(source_path):
        fm.ui.report("invalid")
        fm.ui.report(f"No such file {source_path}")
        return

    dest_dir_path = os.path.dirname(source_path)
    if dest_dir:
        dest_dir_path = os.path.abspath(os.path.join(dest_dir_path, dest_dir))
        if not await is_existing_dir(dest_dir_path):
            fm.ui.report("invalid")
            fm.ui.report(f"No such directory {dest_dir_path}")
            return

    dest_path = os.path.join(dest_dir_path, decompressed_name(os.path.basename(source_path)))

    await _run_pipeline(
        fm, decompress_file, source_path, dest_path,
        "Unpacking, wait please...", "Unpacking done: ",
    )


async def _run_pipeline(fm, transform, source_path, dest_path, start_text, done_text):
    log.debug("%s: %s -> %s", transform.__name__, source_path, dest_path)

    if await path_exists(dest_path):
        fm.ui.report("failed")
        fm.ui.report(f"File {dest_path}", " already exists")
        return

    fm.ui.report(start_text)
    started = time.perf_counter()
    try:
        await asyncio.to_thread(transform, source_path, dest_path)
    except FileExistsError:
        # created by someone else since the check above, not ours to remove
        fm.ui.report("failed")
        fm.ui.report(f"File {dest_path}", " already exists")
        return
    except Exception as e:
        log.exception("%s failed for %s", transform.__name__, source_path)
        fm.ui.report("failed")
        fm.ui.report(e)
        await _remove_partial(dest_path)
        return

    log.info("%s took %.3fs", transform.__name__, time.perf_counter() - started)
    fm.ui.report(done_text, dest_path)


async def _remove_partial(dest_path: str) -> None:
    """Best-effort removal of a destination left behind by a failed pipeline"""
    if not await is_existing_file(dest_path):
        return
    try:
        await asyncio.to_thread(os.remove, dest_path)
    except OSError:
        log.warning("Could not remove partial output %s", dest_path, exc_info=True)
