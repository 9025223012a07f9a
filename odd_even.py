EVEN, ODD = "Even", "Odd"
LABELS = (EVEN, ODD)

SAMPLE_NUMBERS = (4, 5)
PROMPT = "Enter a number: "
INVALID_INPUT_MESSAGE = "Please enter a valid integer."


def check_odd_even(number):
    return EVEN if number % 2 == 0 else ODD


def describe_number(number):
    return f"The number {number} is {check_odd_even(number)}."


def parse_number(text):
    return int(text.strip())


def run_demo(numbers=SAMPLE_NUMBERS):
    for number in numbers:
        print(check_odd_even(number))


def prompt_and_classify(read=None):
    """Ask for one number and print its parity. Returns the label, or None on bad input."""
    if read is None:
        read = input
    try:
        number = parse_number(read(PROMPT))
    except (ValueError, EOFError):
        print(INVALID_INPUT_MESSAGE)
        return None
    print(describe_number(number))
    return check_odd_even(number)


if __name__ == '__main__':
    run_demo()
    prompt_and_classify()
