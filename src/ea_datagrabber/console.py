"""Interactive console menu for finding and downloading datasets."""

from pathlib import Path
from typing import Callable, List, Optional

from .client import DataGrabberClient
from .schemas import BlobRecord, DownloadSummary

INFO = "\033[38;5;214mInfo: \033[0m"
USER_INPUT = "\033[34mUser Input: \033[0m"
SUCCESS = "\033[32mSuccess: \033[0m"
GREY = "\033[38;5;150m"
RED = "\033[31m"
PURPLE = "\033[35m"
RESET = "\033[0m"

MENU_OPTIONS = [
    "  1. \033[32mDownload Files\033[0m",
    "  2. \033[38;5;214mChange Output Directory\033[0m",
    "  3. \033[31mExit\033[0m",
]

EXIT_KEY = "x"

DOWNLOAD_INSTRUCTIONS = f"""\
{INFO}(x -> Enter) To Exit

{INFO}Enter a filepath to select with an optional start date (-sd) and end date (-ed)

      Note: Optionally add only a -sd or an -ed to get all specified files before or after a given date, and all
            incorrectly formatted dates will be ignored

      Note: If an expected filepath is not working, download a file via "https://www.emi.ea.govt.nz/Wholesale/Datasets"
            using the network tab within dev-tools and take the path (including) "Datasets/" onwards,
            alternatively you can use the webpage URL but note "/Datasets" must
            come before "/Wholesale" within the input below (e.g. "Datasets/Wholesale/...")

      Example Input: Datasets/Wholesale/BidsAndOffers/Bids/2018/20180623_Bids.csv
      Example Input: Datasets/Wholesale/BidsAndOffers/Bids/ -sd YYYY-MM-DD -ed YYYY-MM-DD

{INFO}If a partial path is inputted all files within that tree will be selected.

      Example Input: Datasets/Wholesale/BidsAndOffers (This will return all files with this starting predicate)
"""


class DataGrabberConsole:
    """Menu loop around a DataGrabberClient."""

    def __init__(
        self,
        client: DataGrabberClient,
        output_dir: Path,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ):
        self.client = client
        self.output_dir = Path(output_dir)
        self._input = input_func
        self._print = print_func

    def prompt(self, message: str) -> str:
        return self._input(f"{USER_INPUT}{message}")

    def info(self, message: str) -> None:
        self._print(f"{INFO}{message}{RESET}")

    def error(self, message: str) -> None:
        self._print(f"{RED}{message}{RESET}")

    def success(self, message: str) -> None:
        self._print(f"{SUCCESS}{message}{RESET}")

    def display_path(self, url: str) -> str:
        """Strip the datasets base URL for display."""
        base = self.client.settings.datasets_url
        if url.startswith(base):
            return url[len(base):]
        return url

    def print_records(self, records: List[BlobRecord]) -> None:
        """List records in alternating colours followed by the count."""
        for i, record in enumerate(records, 1):
            path = self.display_path(record.url)
            self._print(path if i % 2 == 0 else f"{GREY}{path}{RESET}")
        self._print()
        self.info(f"{len(records)} Containers Found")

    def print_summary(self, summary: DownloadSummary) -> None:
        if summary.failed_files:
            for name in summary.failed_files:
                self._print(f"  {RED}{name}{RESET}")
            self.error("  Failed Downloads")
            self._print()
        self.info(f"{summary.completed} File(s) Downloaded Successfully")
        self.info(f"{summary.failed + summary.skipped} File(s) Downloads Failed")

    def run_download(self) -> Optional[DownloadSummary]:
        """Ask for a query, list the matches and download them on confirmation.

        Returns:
            The download summary, or None if nothing was downloaded
        """
        query = ""
        while not query.strip():
            self._print(DOWNLOAD_INSTRUCTIONS)
            query = self.prompt(": ")

        query = query.strip()
        if query.lower() == EXIT_KEY:
            return None

        _, _, records = self.client.search(query)
        if not records:
            self.info(f"No containers matching the input: {query}")
            return None

        self.print_records(records)
        while True:
            self.info("Would you like to download all of the following files ? (y / n)")
            answer = self.prompt(": ")
            if answer == "y":
                summary = self.client.download_batch(records, self.output_dir)
                self.print_summary(summary)
                return summary
            if answer == "n":
                return None
            self.print_records(records)
            self.error(f'"{answer}" is not a valid input')

    def change_output_directory(self) -> None:
        """Ask for a new output directory until an existing one is given."""
        while True:
            self.info("(x -> Enter) To Exit ")
            path = self.prompt("Enter new output Directory (Full System Path): ").lstrip()

            if path.lower() == EXIT_KEY:
                return

            if path and Path(path).is_dir():
                self.output_dir = Path(path)
                self.success(f"Output directory changed to {self.output_dir}")
                return
            self.error("Directory does not exist!")

    def run(self) -> None:
        """Main menu loop."""
        self._print(f"{PURPLE}** Quickly download files from the New Zealand Electricity Authority **{RESET}")

        while True:
            self._print()
            for option in MENU_OPTIONS:
                self._print(option)
            self._print()
            self._print(f"  Output Directory : {self.output_dir}")
            self._print()
            choice = self.prompt("Please enter a corresponding key to continue: ").strip()

            if choice == "1":
                self.run_download()
            elif choice == "2":
                self.change_output_directory()
            elif choice == "3":
                return
            else:
                self.error("   Invalid input, try again.")
