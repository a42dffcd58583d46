"""Receipt CSV parsing, normalization, and loading."""
from .loader import decode_upload, load_default_dataset, load_records, read_csv_text
from .normalize import coerce_number, empty_records, is_valid_row, normalize_rows
from .parser import parse_delimited
from .schemas import NormalizeReport, ParseOptions
