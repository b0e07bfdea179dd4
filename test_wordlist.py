# -*- coding: utf-8 -*-
"""字典加载、校验与去重"""

import pytest

from subkrek.core.wordlist import WordlistManager
from subkrek.errors import EmptyWordlist, WordlistNotADirectory, WordlistNotFound
from subkrek.utils.helpers import is_valid_label


@pytest.mark.parametrize('word', [
    'www', 'a', 'test-domain', 'dev_01', 'api.v2', 'A1', 'x' * 63,
])
def test_valid_labels(word):
    assert is_valid_label(word)


@pytest.mark.parametrize('word', [
    '', 'x' * 64, '-www', 'www-', '_www', '.www', 'www.', 'a..b', 'a--b',
    'a=b', 'a[b', 'a]b', 'a{b', 'a}b', 'a?b', 'a&b', 'has space', 'ünï', 'www\n',
])
def test_invalid_labels(word):
    assert not is_valid_label(word)


def test_loading_skips_comments_and_blank_lines(tmp_path, write_wordlist):
    path = write_wordlist('test.txt', 'www\nmail\n\nftp\n# comment\ntest-domain\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(path)

    assert manager.load_all() == 4
    assert manager.fragments() == {'www', 'mail', 'ftp', 'test-domain'}


def test_invalid_lines_are_skipped_not_fatal(tmp_path, write_wordlist):
    path = write_wordlist('mixed.txt', 'valid\ninvalid word\nq?x=1\n.lead\ntrail.\n[x]\nvalid-word\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(path)
    manager.load_all()

    assert manager.fragments() == {'valid', 'valid-word'}
    assert manager.rejected == 5
    for word in manager.fragments():
        assert is_valid_label(word)
        assert not any(c in word for c in '=[]{}?&')


def test_duplicates_across_files_collapse(tmp_path, write_wordlist):
    first = write_wordlist('one.txt', 'www\napi\n')
    second = write_wordlist('two.txt', 'WWW\nmail\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(first)
    manager.register_file(second)
    manager.load_all()

    assert sorted(manager.fragments()) == ['api', 'mail', 'www']


def test_register_file_is_idempotent(tmp_path, write_wordlist):
    write_wordlist('list.txt', 'www\n')
    manager = WordlistManager(tmp_path)
    manager.register_file('list.txt')
    manager.register_file(tmp_path / 'list.txt')

    assert manager.paths == [(tmp_path / 'list.txt').resolve()]


def test_relative_paths_resolve_against_base_directory(tmp_path, write_wordlist):
    write_wordlist('nested/words.txt', 'blog\n')
    manager = WordlistManager(tmp_path)
    manager.register_file('nested/words.txt')
    manager.load_all()

    assert manager.fragments() == {'blog'}


def test_missing_file(tmp_path):
    manager = WordlistManager(tmp_path)
    with pytest.raises(WordlistNotFound):
        manager.register_file('nope.txt')


def test_directory_loading_filters_extension(tmp_path, write_wordlist):
    lists = tmp_path / 'lists'
    write_wordlist('list1.txt', 'www\nmail', directory=lists)
    write_wordlist('list2.txt', 'ftp\nsmtp', directory=lists)
    write_wordlist('notes.md', 'ignored', directory=lists)

    manager = WordlistManager(tmp_path)
    registered = manager.register_directory('lists')
    manager.load_all()

    assert len(registered) == 2
    assert manager.fragments() == {'www', 'mail', 'ftp', 'smtp'}


def test_register_directory_errors(tmp_path, write_wordlist):
    path = write_wordlist('file.txt', 'www\n')
    manager = WordlistManager(tmp_path)

    with pytest.raises(WordlistNotFound):
        manager.register_directory('missing')
    with pytest.raises(WordlistNotADirectory):
        manager.register_directory(path)


def test_register_dispatches_on_path_type(tmp_path, write_wordlist):
    write_wordlist('a.txt', 'www\n', directory=tmp_path / 'dir')
    path = write_wordlist('b.txt', 'api\n')
    manager = WordlistManager(tmp_path)
    manager.register('dir')
    manager.register(path)
    manager.load_all()

    assert manager.fragments() == {'www', 'api'}


def test_empty_wordlist(tmp_path, write_wordlist):
    path = write_wordlist('empty.txt', '\n# only a comment\n?=&\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(path)

    with pytest.raises(EmptyWordlist):
        manager.load_all()


def test_unreadable_file_is_skipped(tmp_path, write_wordlist):
    good = write_wordlist('good.txt', 'www\n')
    bad = tmp_path / 'bad.txt'
    bad.write_bytes(b'\xff\xfe\xfa\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(bad)
    manager.register_file(good)

    manager.load_all()
    assert manager.fragments() == {'www'}


def test_load_all_reloads_from_scratch(tmp_path, write_wordlist):
    path = write_wordlist('list.txt', 'www\n')
    manager = WordlistManager(tmp_path)
    manager.register_file(path)
    manager.load_all()

    path.write_text('api\n', encoding='utf-8')
    manager.load_all()
    assert manager.fragments() == {'api'}


def test_fragments_is_read_only_view(tmp_path, write_wordlist):
    manager = WordlistManager(tmp_path)
    manager.register_file(write_wordlist('list.txt', 'www\n'))
    manager.load_all()

    with pytest.raises(AttributeError):
        manager.fragments().add('evil')


def test_merge():
    assert WordlistManager.merge(['www', 'api'], ['api', 'mail'], []) == ['api', 'mail', 'www']
