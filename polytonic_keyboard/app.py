"""
Demo polytonic Greek keyboard (tkinter).

Wires a SuggestionService to an on-screen keyboard:
    - press and hold a vowel (or rho) for its polytonic forms
    - ´ ^ ῾ put an acute, circumflex or rough breathing on the last letter
    - space / enter commit the word and teach it to the engine
    - TAB accepts the first completion

Run:
    polytonic-keyboard
    polytonic-keyboard --corpus texts.txt
    polytonic-keyboard --dataset some-user/greek-corpus --text-field text
"""

import argparse
import tkinter as tk
from tkinter import ttk

from .catalog import ACUTE, CIRCUMFLEX, GRAVE, ROUGH, SMOOTH, apply_marks
from .config import DEFAULT_DATASET_SPLIT, DEFAULT_TEXT_FIELD, MAX_VARIANTS, MODEL_VERSION
from .corpus import load_corpus_file, load_dataset_texts, train_service
from .service import SuggestionService
from .text_utils import (
    get_current_token,
    last_committed_word,
    replace_current_token,
    replace_last_character,
)

LONG_PRESS_MS = 200

KEY_ROWS = [
    ["^", "ε", "ρ", "τ", "υ", "θ", "ι", "ο", "π"],
    ["´", "α", "σ", "δ", "φ", "γ", "η", "ξ", "κ", "λ", "῾"],
    ["ζ", "χ", "ψ", "ω", "β", "ν", "μ", "ς"],
]

LONG_PRESS_KEYS = set("αεηιουωρ")

# Standalone mark keys: tap mark, and the choices offered on long-press
MARK_KEYS = {
    "´": (ACUTE, [ACUTE, GRAVE]),
    "^": (CIRCUMFLEX, [CIRCUMFLEX]),
    "῾": (ROUGH, [ROUGH, SMOOTH]),
}


# ---------------------------------------------------------------------
# GUI APPLICATION
# ---------------------------------------------------------------------
class GreekKeyboard(tk.Tk):
    def __init__(self, service=None):
        super().__init__()

        self.service = service if service is not None else SuggestionService()
        self.popup = None
        self._press_job = None
        self._long_pressed = False

        self.title("Polytonic Greek Keyboard")
        self.geometry("900x600")
        self.minsize(700, 500)

        self.create_widgets()
        self.bind("<Tab>", lambda e: self.auto_complete())
        self.update_suggestions()

    def create_widgets(self):
        main_container = ttk.Frame(self, padding="10")
        main_container.pack(fill="both", expand=True)

        # TEXT AREA
        text_frame = ttk.LabelFrame(main_container, text="Text Input", padding="10")
        text_frame.pack(fill="both", expand=True, pady=(0, 10))

        self.text_display = tk.Text(text_frame, font=("Segoe UI", 16), wrap="word", height=6)
        self.text_display.pack(fill="both", expand=True)
        self.text_display.bind("<KeyRelease>", lambda e: self.update_suggestions())
        # Physical space / enter commit the word just like the on-screen keys
        self.text_display.bind("<KeyRelease-space>", lambda e: self.commit_word(), add="+")
        self.text_display.bind("<KeyRelease-Return>", lambda e: self.commit_word(), add="+")

        # WORD COMPLETION
        ttk.Label(main_container, text="Word Completion:",
                  font=("Segoe UI", 12, "bold")).pack(anchor="w")
        self.completion_container = ttk.Frame(main_container)
        self.completion_container.pack(fill="x", pady=(0, 5))

        # NEXT CHARACTER
        ttk.Label(main_container, text="Next Character:",
                  font=("Segoe UI", 12, "bold")).pack(anchor="w")
        self.prediction_container = ttk.Frame(main_container)
        self.prediction_container.pack(fill="x", pady=(0, 10))

        # KEYBOARD
        keyboard_frame = ttk.Frame(main_container)
        keyboard_frame.pack()
        self.create_keyboard(keyboard_frame)

        self.status_bar = ttk.Label(main_container, text="Ready", relief=tk.SUNKEN, anchor=tk.W)
        self.status_bar.pack(fill="x", pady=(5, 0))

    def get_text(self):
        return self.text_display.get("1.0", "end-1c")

    def set_text(self, text):
        self.text_display.delete("1.0", "end")
        self.text_display.insert("1.0", text)
        self.update_suggestions()

    # -----------------------------------------------------------------
    # Suggestions
    # -----------------------------------------------------------------
    def update_suggestions(self):
        for widget in self.completion_container.winfo_children():
            widget.destroy()
        for widget in self.prediction_container.winfo_children():
            widget.destroy()

        text = self.get_text()
        token = get_current_token(text)

        for word in self.service.get_word_suggestions(token):
            ttk.Button(self.completion_container, text=word,
                       command=lambda w=word: self.apply_completion(w)).pack(side="left", padx=3)

        if token:
            for char in self.service.get_next_character_predictions(text):
                ttk.Button(self.prediction_container, text=char, width=3,
                           command=lambda c=char: self.insert_char(c)).pack(side="left", padx=2)

        self.status_bar.config(text=f"Vocabulary: {self.service.model.vocabulary_size} words")

    def apply_completion(self, word):
        self.set_text(replace_current_token(self.get_text(), word))
        self.commit_word()
        self.status_bar.config(text=f"Applied: '{word}'")

    def auto_complete(self):
        token = get_current_token(self.get_text())
        if token:
            completions = self.service.get_word_suggestions(token, limit=1)
            if completions:
                self.apply_completion(completions[0])
        return "break"

    def commit_word(self):
        word = last_committed_word(self.get_text())
        if word:
            self.service.learn_from_text(word)
        self.update_suggestions()

    # -----------------------------------------------------------------
    # Editing
    # -----------------------------------------------------------------
    def insert_char(self, char):
        self.text_display.insert("end", char)
        self.update_suggestions()

    def apply_mark(self, tag):
        text = self.get_text()
        if not text or text[-1].isspace():
            return
        self.set_text(replace_last_character(text, apply_marks(text[-1], tag)))

    def backspace(self):
        self.text_display.delete("end-2c")
        self.update_suggestions()

    def space(self):
        self.insert_char(" ")
        self.commit_word()

    def enter(self):
        self.insert_char("\n")
        self.commit_word()

    # -----------------------------------------------------------------
    # Long-press popup
    # -----------------------------------------------------------------
    def on_key_press(self, key, button):
        self._long_pressed = False
        self._press_job = self.after(LONG_PRESS_MS, lambda: self.on_long_press(key, button))

    def on_key_release(self, key):
        if self._press_job is not None:
            self.after_cancel(self._press_job)
            self._press_job = None
        if self._long_pressed:
            return

        if key in MARK_KEYS:
            self.apply_mark(MARK_KEYS[key][0])
        else:
            self.insert_char(key)

    def on_long_press(self, key, button):
        self._press_job = None
        self._long_pressed = True

        if key in MARK_KEYS:
            options = [(apply_marks("α", tag), tag) for tag in MARK_KEYS[key][1]]
        else:
            options = [(variant, None) for variant in self.service.get_variants(key)]
        self.show_popup(key, button, options[:MAX_VARIANTS])

    def show_popup(self, key, button, options):
        self.hide_popup()
        if not options:
            return

        self.popup = tk.Toplevel(self)
        self.popup.overrideredirect(True)
        self.popup.geometry(f"+{button.winfo_rootx()}+{button.winfo_rooty() - 60}")
        self.popup.bind("<Escape>", lambda e: self.hide_popup())

        for label, tag in options:
            cell = ttk.Frame(self.popup, padding=2)
            cell.pack(side="left")
            ttk.Button(cell, text=label, width=3,
                       command=lambda v=label, t=tag: self.option_selected(key, v, t)).pack()
            hint = self.service.hint_for(label)
            if hint:
                ttk.Label(cell, text=hint, font=("Segoe UI", 7), foreground="gray").pack()

    def hide_popup(self):
        if self.popup is not None:
            self.popup.destroy()
            self.popup = None

    def option_selected(self, key, option, tag):
        self.hide_popup()

        if tag is not None:
            self.apply_mark(tag)
            return

        self.insert_char(option)
        self.service.record_selection(option, key)
        self.status_bar.config(text=self.service.describe_variant(option))

    def create_keyboard(self, parent):
        style = ttk.Style()
        style.configure("Keyboard.TButton", font=("Segoe UI", 14), padding=6)

        for row in KEY_ROWS:
            r = ttk.Frame(parent)
            r.pack(pady=2)
            for ch in row:
                btn = ttk.Button(r, text=ch, width=3, style="Keyboard.TButton")
                btn.pack(side="left", padx=1)
                if ch in LONG_PRESS_KEYS or ch in MARK_KEYS:
                    btn.bind("<ButtonPress-1>", lambda e, c=ch, b=btn: self.on_key_press(c, b))
                    btn.bind("<ButtonRelease-1>", lambda e, c=ch: self.on_key_release(c))
                else:
                    btn.configure(command=lambda c=ch: self.insert_char(c))

        bottom = ttk.Frame(parent)
        bottom.pack(pady=5)
        ttk.Button(bottom, text="SPACE", width=20, command=self.space).pack(side="left", padx=5)
        ttk.Button(bottom, text="⌫", width=6, command=self.backspace).pack(side="left", padx=5)
        ttk.Button(bottom, text="↵", width=6, command=self.enter).pack(side="left", padx=5)


# ---------------------------------------------------------------------
# RUN APPLICATION
# ---------------------------------------------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Polytonic Greek keyboard demo")
    parser.add_argument("--corpus", help="UTF-8 text file to learn from, one passage per line")
    parser.add_argument("--dataset", help="Hugging Face dataset name to learn from")
    parser.add_argument("--split", default=DEFAULT_DATASET_SPLIT)
    parser.add_argument("--text-field", default=DEFAULT_TEXT_FIELD)
    parser.add_argument("--limit", type=int, default=None, help="Max dataset examples")
    args = parser.parse_args(argv)

    print("\n" + "=" * 60)
    print("Starting Polytonic Greek Keyboard")
    print(f"Model version: {MODEL_VERSION}")
    print("=" * 60)

    service = SuggestionService()
    if args.corpus:
        train_service(service, load_corpus_file(args.corpus))
    if args.dataset:
        train_service(service, load_dataset_texts(args.dataset, args.split, args.text_field, args.limit))

    app = GreekKeyboard(service)
    app.mainloop()


if __name__ == "__main__":
    main()
