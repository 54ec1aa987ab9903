import asyncio
import os


async def is_existing_file(path: str) -> bool:
    """True if ``path`` is an existing regular file"""
    return await asyncio.to_thread(os.path.isfile, path)


async def is_existing_dir(path: str) -> bool:
    """True if ``path`` is an existing directory"""
    return await asyncio.to_thread(os.path.isdir, path)


async def path_exists(path: str) -> bool:
    """True if anything at all sits at ``path``"""
    return await asyncio.to_thread(os.path.lexists, path)
