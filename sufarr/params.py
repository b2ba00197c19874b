# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Parameters for the command line tool.
from pathlib import Path

class ToolParams:
    @classmethod
    def from_docopt_args(cls, args):
        commands = [c for c in ('build', 'search') if args.get(c)]
        if len(commands) != 1:
            raise ValueError('Exactly one of build or search expected!')
        command = commands[0]

        text = args.get('<text>')
        file_path = args.get('--file')
        if (text is None) == (file_path is None):
            raise ValueError('Give either <text> or --file!')
        if file_path is not None:
            file_path = Path(file_path)

        limit = int(args.get('--limit') or 40)
        if limit <= 0:
            raise ValueError('--limit must be positive, got %d' % limit)

        patterns = list(args.get('<pattern>') or [])
        if command == 'search' and not patterns:
            raise ValueError('search needs at least one <pattern>!')
        return cls(command, text, file_path, patterns,
                   limit, bool(args.get('--all')),
                   bool(args.get('--verbose')))

    def __init__(self,
                 command, text, file_path, patterns,
                 limit, find_all, verbose):
        self.command = command
        self.text = text
        self.file_path = file_path
        self.patterns = patterns
        self.limit = limit
        self.find_all = find_all
        self.verbose = verbose

    def load_text(self):
        if self.file_path is None:
            return self.text
        with open(self.file_path, encoding = 'utf-8') as f:
            text = f.read()
        if text.endswith('\n'):
            text = text[:-1]
        return text

    def to_string(self):
        fields = ['command', 'file_path', 'patterns',
                  'limit', 'find_all', 'verbose']
        strs = ['%-10s: %s' % (f, getattr(self, f)) for f in fields]
        return '\n'.join(strs)
