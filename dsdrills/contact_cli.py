"""Interactive, menu-driven contact book shell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Callable, TextIO

from .contacts import Contact, ContactBook, Field

DEFAULT_PATH = "contact.txt"

MENU = (
    "*********请选择您要进行的操作*******",
    "*******1.加载通讯录历史联系人信息****",
    "*******2.添加通讯录联系人信息*******",
    "*******3.删除通讯录联系人信息*******",
    "*******4.展示通讯录联系人信息*******",
    "*******5.查找通讯录联系人信息*******",
    "*******6.修改通讯录联系人信息*******",
    "*************0.退出程序************",
)

EDIT_MENU = (
    "****请选择您要修改的内容****",
    "*******1.联系人姓名*******",
    "*******2.联系人性别*******",
    "*******3.联系人年龄*******",
    "*******4.联系人电话*******",
    "*******5.联系人地址*******",
    "*******0.退出修改 ********",
)

INVALID_CHOICE = "输入错误请重新输入"
BOOK_FULL = "通讯录可添加的名额已满，添加失败！"


class ContactShell:
    """Reads whitespace-separated answers from ``stdin`` and drives a book."""

    def __init__(
        self,
        book: ContactBook | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        path: str = DEFAULT_PATH,
    ) -> None:
        self.book = book if book is not None else ContactBook()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.path = path
        self._tokens = self._token_stream()

    def _token_stream(self) -> Iterator[str]:
        for line in self.stdin:
            yield from line.split()

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def _number(self) -> int | None:
        token = self._word()
        try:
            return int(token)
        except ValueError:
            return None

    def run(self) -> None:
        """Run the main menu until the user quits or input ends."""
        actions: dict[int, Callable[[], None]] = {
            1: self._load,
            2: self._add,
            3: self._delete,
            4: self._show,
            5: self._find,
            6: self._modify,
        }
        try:
            while True:
                self._say(*MENU)
                choice = self._number()
                if choice == 0:
                    break
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._say(INVALID_CHOICE)
                    continue
                action()
        except EOFError:
            pass
        self._finish()

    def _finish(self) -> None:
        self._say("是否保存历史数据？", "0.不是 or 1.是")
        try:
            answer = self._number()
        except EOFError:
            answer = 0
        if answer:
            self._save()
        self.book.clear()
        self._say("销毁成功！")

    def _load(self) -> None:
        try:
            self.book.load(self.path)
        except OSError as error:
            self._say(f"fopen: {error.strerror or error}")
            return
        except OverflowError:
            self._say(BOOK_FULL)
            return
        self._say("通讯录历史数据加载成功！")

    def _save(self) -> None:
        try:
            self.book.save(self.path)
        except OSError as error:
            self._say(f"fopen: {error.strerror or error}")
            return
        self._say("通讯录数据保存成功！")

    def _add(self) -> None:
        if self.book.is_full:
            self._say(BOOK_FULL)
            return
        self._say("请输入要添加的联系人姓名:")
        name = self._word()
        if self.book.index_of(name) >= 0:
            self._say("您要添加的联系人已存在！")
            self._show()
            return
        self._say("请输入要添加的联系人的性别:")
        gender = self._word()
        self._say("请输入要添加的联系人的年龄:")
        age = self._number()
        self._say("请输入要添加的联系人的电话:")
        tel = self._word()
        self._say("请输入要添加的联系人的地址:")
        addr = self._word()
        if age is None:
            self._say("年龄必须是整数，添加失败！")
            return
        try:
            self.book.add(Contact(name, gender, age, tel, addr))
        except ValueError as error:
            self._say(f"{error}，添加失败！")
            return
        self._say("添加成功！")

    def _delete(self) -> None:
        self._say("请输入要删除的联系人的姓名")
        name = self._word()
        if self.book.index_of(name) < 0:
            self._say("您要删除的联系人信息不存在，删除失败")
            return
        self.book.remove(name)
        self._say("删除成功！")

    def _show(self) -> None:
        if len(self.book) == 0:
            self._say("通讯录中未存储任何信息，无法展示")
            return
        for number, contact in enumerate(self.book, start=1):
            self._say(contact.describe(number))

    def _find(self) -> None:
        self._say("请输入要查找的联系人的姓名")
        name = self._word()
        index = self.book.index_of(name)
        if index < 0:
            self._say("您要查找的联系人信息不存在，查找失败！")
            return
        self._say("查找成功！联系人信息如下：")
        self._say(self.book.get(name).describe(index + 1))

    def _modify(self) -> None:
        self._say("请输入要修改的联系人的姓名")
        name = self._word()
        if self.book.index_of(name) < 0:
            self._say("您要修改的联系人信息不存在，修改失败")
            return
        while True:
            self._say(*EDIT_MENU)
            choice = self._number()
            if choice == 0:
                self._say("修改结束")
                break
            self._say("修改开始！")
            if choice is None or choice not in {field.value for field in Field}:
                self._say(INVALID_CHOICE)
                continue
            value = self._word()
            try:
                updated = self.book.update(name, choice, value)
            except ValueError:
                self._say(INVALID_CHOICE)
                continue
            name = updated.name
            self._say("修改成功")


def main(argv: list[str] | None = None) -> int:
    """Start the contact book shell on standard input and output."""
    parser = argparse.ArgumentParser(prog="contacts", description="Contact book.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="record file to load and save")
    parser.add_argument("--max-entries", type=int, default=None, help="capacity limit")
    args = parser.parse_args(argv)
    shell = ContactShell(ContactBook(args.max_entries), path=args.file)
    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())