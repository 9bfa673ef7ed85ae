from typing import Callable, Dict, Iterable, List


def chain_members(chains: List[dict]) -> List[str]:
    """Every node id appearing in any chain, first-seen order, no repeats."""
    return list(dict.fromkeys(uid for chain in chains for uid in chain["users"]))


def enrich_chains(chains: List[dict], resolve_names: Callable[[Iterable[str]], Dict[str, str]]) -> List[dict]:
    """Attach `peopleNames` parallel to `users`; unknown ids fall back to the id itself."""
    members = chain_members(chains)
    names = resolve_names(members) if members else {}
    for chain in chains:
        chain["peopleNames"] = [names.get(uid) or uid for uid in chain["users"]]
    return chains
