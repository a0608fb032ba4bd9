"""
Security logging for audit trail.
"""

import logging
import os
from typing import Optional

class SecurityLogger:
    """Log security-relevant events."""
    
    def __init__(self, log_file: Optional[str] = None):
        self.logger = logging.getLogger('notqwerty_security')
        self.logger.setLevel(logging.INFO)
        
        if log_file:
            self.add_log_file(log_file)
        elif not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())
    
    def add_log_file(self, log_file: str):
        """Attach a file handler writing to log_file, once per file."""
        path = os.path.abspath(log_file)
        for handler in self.logger.handlers:
            if getattr(handler, "baseFilename", None) == path:
                return
        
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.INFO)
        
        # Formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        fh.setFormatter(formatter)
        
        self.logger.addHandler(fh)
    
    def log_wordlist_change(self, action: str, key: str, count: Optional[int] = None):
        """Log a word list being loaded or removed."""
        count_info = f" ({count} words)" if count is not None else ""
        self.logger.info(f"Wordlist {action}: {key}{count_info}")
    
    def log_evaluation(self, accepted: bool, reason: str = ""):
        """Log a password decision. The password itself is never logged."""
        status = "ACCEPTED" if accepted else "REJECTED"
        reason_info = f" - {reason}" if reason else ""
        self.logger.info(f"Password check {status}{reason_info}")
    
    def log_security_event(self, event: str, details: str = ""):
        """Log general security events."""
        details_str = f" - {details}" if details else ""
        self.logger.warning(f"Security event: {event}{details_str}")

# Global logger instance
security_logger = SecurityLogger()
