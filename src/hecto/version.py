NAME = "Hecto editor"
VERSION = "0.1.0"
