from .json_loader import dump_result_file, load_answers_file

__all__ = ["dump_result_file", "load_answers_file"]
