"""Provider API types, their encoding and decoding, and lookup helpers."""