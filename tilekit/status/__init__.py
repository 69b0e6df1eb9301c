"""System readings and the status line generator."""