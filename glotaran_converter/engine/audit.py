from datetime import datetime
import platform

def start_audit(kind: str, source) -> list[str]:
    return [f"Conversion start: {datetime.now().isoformat()}",
            f"Platform: {platform.platform()}",
            f"Importer: {kind}",
            f"Source: {source}"]

def log_step(audit: list[str], msg: str):
    audit.append(msg)
