"""
Memory Initialization File (.mif) output.

The memory is declared one bit wide, so each scanline byte occupies eight
addresses and the address printed for byte i is i * 8.
"""

import os
import stat
import tempfile


def mif_lines(file_name, depth, data):
    """Yield the lines of the document, without line terminators."""
    yield f"-- {file_name} "
    yield ""
    yield f"DEPTH = {depth};"
    yield "WIDTH = 1;"
    yield "ADDRESS_RADIX = HEX;"
    yield "DATA_RADIX = HEX;"
    yield ""
    yield "CONTENT"
    yield "BEGIN"
    yield ""
    for i, byte in enumerate(data):
        yield f"{i * 8:04X} : {byte:02X};"
    yield ""
    yield "END;"


def format_mif(file_name, depth, data):
    return "".join(f"{line}\n" for line in mif_lines(file_name, depth, data))


def write_mif(path, file_name, depth, data):
    """Write the document to `path`.

    Regular files are written through a temporary file next to the resolved
    target, renamed over it once complete; a failed write leaves the target
    as it was. Symlinks are followed, the target keeps its mode, and
    non-regular targets such as /dev/stdout or a FIFO are written directly.
    """
    text = format_mif(file_name, depth, data)
    target = os.path.realpath(path)
    if os.path.exists(target) and not os.path.isfile(target):
        with open(target, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        return

    if os.path.exists(target):
        mode = stat.S_IMODE(os.stat(target).st_mode)
    else:
        umask = os.umask(0)
        os.umask(umask)
        mode = 0o666 & ~umask

    fd, tmp_path = tempfile.mkstemp(prefix='.ttf2mif-', suffix='.tmp',
                                    dir=os.path.dirname(target))
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except BaseException:
        os.unlink(tmp_path)
        raise
