"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    KB = 1024
    MB = 1024 * KB
    GB = 1024 * MB

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 512 Bytes, 1.5 KB, 3.2 MB).
        Binary units, GB is the largest unit. The single decimal digit is
        truncated, never rounded, so no unit ever shows 1024.0.
        """
        if size_bytes < 0:
            return "0 Bytes"

        for unit, label in ((ConvertUtils.GB, "GB"), (ConvertUtils.MB, "MB"), (ConvertUtils.KB, "KB")):
            if size_bytes >= unit:
                tenths = size_bytes * 10 // unit
                return f"{tenths // 10}.{tenths % 10} {label}"
        return f"{size_bytes} Bytes"
