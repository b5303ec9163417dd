import sys
from typing import List, Optional, TextIO

from colorama import Fore, Style

from deeplink_inspector.config.defaults import SECTION_TITLES
from deeplink_inspector.reports.models import ComponentReport, DeeplinkReport


class ConsoleReporter:
    """
    Prints the exported components of a report, one section per category.
    """

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self.stream = stream or sys.stdout
        self.use_color = use_color

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def log(self, text: str, color: str = Fore.WHITE) -> None:
        print(self._paint(text, color), file=self.stream)

    def banner(self, text: str, version: str) -> None:
        self.log(f"{text}    Version: {version}\n", Fore.MAGENTA)

    def info(self, text: str) -> None:
        self.log(text, Fore.GREEN)

    def error(self, text: str) -> None:
        self.log(text, Fore.RED)

    def render_component(self, component: ComponentReport) -> None:
        exported = str(component.is_exported).lower()
        print(f"{self._paint(component.name, Fore.CYAN)} (exported={exported})", file=self.stream)
        for action in component.actions:
            if action:
                print(f"  {self._paint(action, Fore.GREEN)}", file=self.stream)
        for uri in component.uris:
            print(f"  {self._paint(uri, Fore.GREEN)}", file=self.stream)

    def render_section(self, title: str, components: List[ComponentReport]) -> None:
        self.log(f"\nProcessing {title}:", Fore.YELLOW)
        for component in components:
            self.render_component(component)

    def render(self, report: DeeplinkReport) -> None:
        for category, components in report.categories().items():
            self.render_section(SECTION_TITLES[category], components)
