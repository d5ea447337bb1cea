"""
Terminal Display Helpers

Colour codes and the header/step/success/error line printers shared by
the bin/ scripts.
"""


class Colors:
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GRAY = "\033[90m"
    BLUE = "\033[94m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: str) -> str:
    return f"{color}{text}{Colors.RESET}"


def print_header(title: str) -> None:
    line = "=" * 60
    print(f"\n{colored(line, Colors.CYAN)}")
    print(f"{colored(f' {title}', Colors.CYAN + Colors.BOLD)}")
    print(colored(line, Colors.CYAN))


def print_subheader(title: str) -> None:
    print(f"\n{colored(f'--- {title} ---', Colors.BOLD)}")


def print_step(msg: str) -> None:
    print(f"  {colored('→', Colors.BLUE)} {msg}")


def print_success(msg: str) -> None:
    print(f"  {colored('✓', Colors.GREEN)} {msg}")


def print_error(msg: str) -> None:
    print(f"  {colored('✗', Colors.RED)} {msg}")
