"""Controller configuration types and loading."""