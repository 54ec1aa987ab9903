import zstandard as zstd
import os

# Constants
BUFFER_SIZE = 64 * 1024
COMPRESSION_LEVEL = 1  # Fastest standard level, speed over ratio
SUFFIX = ".zst"


class CompressionError(Exception):
    """Raised when the input is not valid Zstandard data"""


def compress_file(file_path: str, output_path: str) -> str:
    """Compress a file using zstandard

    The output file is created exclusively, so an existing file at
    ``output_path`` raises ``FileExistsError`` and is left untouched.

    Args:
        file_path: Path to the file to compress
        output_path: Path for the compressed file, must not exist yet

    Returns:
        Path to the compressed file
    """
    cctx = zstd.ZstdCompressor(level=COMPRESSION_LEVEL)
    with open(file_path, 'rb') as f_in:
        with open(output_path, 'xb') as f_out:
            compressor = cctx.stream_writer(f_out)
            while True:
                chunk = f_in.read(BUFFER_SIZE)
                if not chunk:
                    break
                compressor.write(chunk)
            compressor.flush(zstd.FLUSH_FRAME)
    return output_path


def decompress_file(compressed_path: str, output_path: str) -> str:
    """Decompress a file using zstandard

    Args:
        compressed_path: Path to the compressed file
        output_path: Path where the decompressed file should be saved, must not exist yet

    Returns:
        Path to the decompressed file
    """
    dctx = zstd.ZstdDecompressor()
    with open(compressed_path, 'rb') as f_in:
        with open(output_path, 'xb') as f_out:
            decompressor = dctx.decompressobj()
            try:
                while True:
                    chunk = f_in.read(BUFFER_SIZE)
                    if not chunk:
                        break
                    f_out.write(decompressor.decompress(chunk))
            except zstd.ZstdError as e:
                raise CompressionError(f"Invalid compressed data in {compressed_path}: {e}") from e
            # empty input or a frame cut off partway never reaches the frame end
            if not decompressor.eof:
                raise CompressionError(f"Incomplete compressed data in {compressed_path}")
    return output_path


def compressed_name(file_name: str) -> str:
    """Name of the compressed counterpart of ``file_name``"""
    return f"{file_name}{SUFFIX}"


def decompressed_name(file_name: str) -> str:
    """Strip the last extension, whatever it is"""
    stem, _ = os.path.splitext(file_name)
    return stem
