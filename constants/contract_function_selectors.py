# ERC-20 Standard Function Selectors
ERC20_FUNCTION_SELECTORS = {
    "0x06fdde03": "name()",
    "0x95d89b41": "symbol()",
    "0x313ce567": "decimals()",
    "0x70a08231": "balanceOf(address)",
}

# ERC-1155 Multi-Token Standard Function Selectors
ERC1155_FUNCTION_SELECTORS = {
    "0x01ffc9a7": "supportsInterface(bytes4)",
    "0x00fdd58e": "balanceOf(address,uint256)",
    "0x0e89341c": "uri(uint256)",
}

# Hard-coded selectors for raw calls whose return type varies across deployments
# (string vs bytes32)
NAME_SELECTOR = "0x06fdde03"
SYMBOL_SELECTOR = "0x95d89b41"

# EIP-165 supportsInterface(bytes4)
SUPPORTS_INTERFACE_SELECTOR = "0x01ffc9a7"

# Combined dictionary for easy lookup
ALL_FUNCTION_SELECTORS = {
    **ERC20_FUNCTION_SELECTORS,
    **ERC1155_FUNCTION_SELECTORS,
}


# Helper function to get function signature from selector
def get_function_signature(selector: str) -> str:
    """
    Get function signature from selector

    Args:
        selector: Function selector (e.g., "0x95d89b41")

    Returns:
        Function signature or "Unknown" if not found
    """
    return ALL_FUNCTION_SELECTORS.get(selector.lower(), "Unknown")
