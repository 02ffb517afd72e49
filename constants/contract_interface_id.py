# EIP-165 interface identifiers (XOR of all function selectors in the interface)
ERC165_INTERFACE_ID = "0x01ffc9a7"
ERC721_INTERFACE_ID = "0x80ac58cd"
ERC1155_INTERFACE_ID = "0xd9b67a26"

# ERC1155 metadata extension: uri(uint256)
ERC1155_METADATA_URI_INTERFACE_ID = "0x0e89341c"
