"""Platform adapters: logging, filesystem, mimetype sniffing and transcoding."""
