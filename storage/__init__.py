# Storage module
from .files import (
    DATA_DIR,
    user_dir,
    funko_path,
    ensure_user_dir,
    iter_funko_files,
    read_funko_file,
    write_funko_file,
    delete_funko_file,
)
