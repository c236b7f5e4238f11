def extract_attribute(fragment: str, marker: str) -> str:
    """
    Returns the value between `marker` (e.g. 'src="') and the next double quote.

    Only double-quoted values are understood. An absent marker or a missing
    closing quote yields an empty string.
    """
    start_index = fragment.find(marker)
    if start_index == -1:
        return ""

    value_start = start_index + len(marker)
    end_index = fragment.find('"', value_start)
    if end_index == -1:
        return ""

    return fragment[value_start:end_index]
