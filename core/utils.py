# core/utils.py

"""
Repository for program-wide utilities.
"""


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """
    Checks whether `sentence` contains `word` as a whole word, ignoring case.

    The sentence is split on runs of whitespace and each token is compared to the
    word after case folding. Partial tokens never match:
        - contains_word_ignore_case("ABc def", "abc") == True
        - contains_word_ignore_case("ABc def", "DEF") == True
        - contains_word_ignore_case("ABc def", "AB") == False

    Args:
        sentence (str): The text to search.
        word (str): A single, non-empty word.

    Returns:
        True if any token of the sentence equals the word, ignoring case.

    Raises:
        ValueError: If the word is blank or contains whitespace.
    """
    word = validate_single_word(word).casefold()

    return any(token.casefold() == word for token in sentence.split())


def validate_single_word(word: str) -> str:
    """
    Strips a keyword and ensures it is exactly one non-empty token.

    Raises:
        ValueError: If the keyword is blank or holds more than one word.
    """
    stripped = word.strip()

    if not stripped:
        raise ValueError("Word parameter cannot be empty.")

    if len(stripped.split()) != 1:
        raise ValueError("Word parameter should be a single word.")

    return stripped
