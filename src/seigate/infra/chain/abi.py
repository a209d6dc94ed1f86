"""Minimal ABI fragments for the token standards the gateway reads and writes."""


def _fn(name: str, inputs: list[str], outputs: list[str], mutability: str = "view") -> dict:
    return {
        "type": "function",
        "name": name,
        "stateMutability": mutability,
        "inputs": [{"name": f"arg{i}", "type": t} for i, t in enumerate(inputs)],
        "outputs": [{"name": "", "type": t} for t in outputs],
    }


ERC20_ABI: list[dict] = [
    _fn("name", [], ["string"]),
    _fn("symbol", [], ["string"]),
    _fn("decimals", [], ["uint8"]),
    _fn("totalSupply", [], ["uint256"]),
    _fn("balanceOf", ["address"], ["uint256"]),
    _fn("allowance", ["address", "address"], ["uint256"]),
    _fn("transfer", ["address", "uint256"], ["bool"], "nonpayable"),
    _fn("approve", ["address", "uint256"], ["bool"], "nonpayable"),
]

ERC721_ABI: list[dict] = [
    _fn("name", [], ["string"]),
    _fn("symbol", [], ["string"]),
    _fn("totalSupply", [], ["uint256"]),
    _fn("tokenURI", ["uint256"], ["string"]),
    _fn("ownerOf", ["uint256"], ["address"]),
    _fn("balanceOf", ["address"], ["uint256"]),
    _fn("transferFrom", ["address", "address", "uint256"], [], "nonpayable"),
]

ERC1155_ABI: list[dict] = [
    _fn("uri", ["uint256"], ["string"]),
    _fn("balanceOf", ["address", "uint256"], ["uint256"]),
    _fn("safeTransferFrom", ["address", "address", "uint256", "uint256", "bytes"], [], "nonpayable"),
]
