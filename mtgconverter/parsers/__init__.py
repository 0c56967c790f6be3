from mtgconverter.parsers.liga_csv import decode, decode_or_raise, is_accepted_file_name

__all__ = [
    "decode",
    "decode_or_raise",
    "is_accepted_file_name",
]
