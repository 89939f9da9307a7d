from onecopy.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "blake2b": HashAlgorithmName.BLAKE2B,
    "xxh128": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Hash function used to fingerprint file content:\n"
    "  sha256   : SHA-256, cryptographic (default)\n"
    "  blake2b  : BLAKE2b, cryptographic\n"
    "  xxh128   : xxHash128, much faster, not cryptographic\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in Downloads and confirm deletion interactively
  %(prog)s ~/Downloads

  Same, but move duplicates to the system trash instead of deleting them
  %(prog)s ~/Downloads --trash

  Delete without confirmation (for scripts), with the fast hash function
  %(prog)s ~/Downloads --yes --algorithm xxh128 > ~/Downloads/report.txt
"""
