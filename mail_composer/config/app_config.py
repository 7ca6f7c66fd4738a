"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mail_composer.errors import invalid_input


class AppConfiguration(BaseModel):
    """
    Application-level settings loaded from app.json.

    Attributes:
        from_: Sender name (JSON key "from")
        department: Sender department
        thunderbird_exe: Path to the Thunderbird executable
        log_dir: Directory holding the start-time store
        input_dir: Directory holding the address book and start-time file
        address_book_file: Address book file name
        output_dir: Output directory
        start_time_file: Start-time store file name
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_: str = Field(alias="from")
    department: str
    thunderbird_exe: str
    log_dir: str
    input_dir: str
    address_book_file: str
    output_dir: str
    start_time_file: str

    @field_validator("thunderbird_exe")
    def normalize_exe_path(cls, v: str) -> str:
        # Windows and Unix separators are both accepted
        return v.replace("\\", "/")

    def validate_settings(self) -> None:
        """
        Check that required settings are present.

        Raises:
            AppError: UNAVAILABLE_FOR_LEGAL_REASONS naming the first blank field
        """
        if not self.from_.strip():
            raise invalid_input(
                "sender name is not set",
                'Set the sender name in the "from" field of app.json.',
            )
        if not self.department.strip():
            raise invalid_input(
                "department is not set",
                'Set the department name in the "department" field of app.json.',
            )
        if not self.thunderbird_exe.strip():
            raise invalid_input(
                "Thunderbird executable path is not set",
                'Set the Thunderbird path in the "thunderbird_exe" field of app.json.',
            )

    def address_book_path(self) -> Path:
        """Get address book path ({input_dir}/{address_book_file})."""
        return Path(self.input_dir) / self.address_book_file

    def start_time_file_path(self) -> Path:
        """Get start-time file path ({input_dir}/{start_time_file})."""
        return Path(self.input_dir) / self.start_time_file

    def output_dir_path(self) -> Path:
        return Path(self.output_dir)

    def log_dir_path(self) -> Path:
        return Path(self.log_dir)
