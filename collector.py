import time

from config import MIN_REVIEWERS, SCROLL_MAX_ROUNDS, SCROLL_PAUSE, SEARCH_TEMPLATE
from parsing import parse_result_list


def build_query(region, template=SEARCH_TEMPLATE):
    return template.format(region=region)


def scroll_to_end(page, box, pause=SCROLL_PAUSE, max_rounds=SCROLL_MAX_ROUNDS):
    """
    Keep scrolling the results list until its height stops changing
    between two polls, or `max_rounds` is reached. Returns rounds used.
    """
    previous_height = 0
    for rounds in range(1, max_rounds + 1):
        current_height = page.scroll_results(box)
        time.sleep(pause)

        if current_height == previous_height:
            return rounds
        previous_height = current_height

    print(f"  Scroll limit of {max_rounds} rounds reached, list may be incomplete")
    return max_rounds


def collect_candidates(page, region, pause=SCROLL_PAUSE, max_rounds=SCROLL_MAX_ROUNDS,
                       min_reviewers=MIN_REVIEWERS):
    """Search a region and return its provisional place records."""
    query = build_query(region)
    box = page.search(query)
    if box is None:
        print(f"  -> No results for '{query}'")
        return []

    rounds = scroll_to_end(page, box, pause=pause, max_rounds=max_rounds)
    candidates = parse_result_list(page.results_html(box), region, min_reviewers=min_reviewers)
    print(f"  -> Found {len(candidates)} candidates ({rounds} scrolls)")
    return candidates
