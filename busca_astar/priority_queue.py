"""
Fila de prioridade mínima endereçável (heap de pareamento).

Cada elemento aparece no máximo uma vez. offer() insere um elemento novo ou reduz a
prioridade de um já presente (decrease-key), e o valor de retorno informa se o estado da
fila melhorou: é o único ponto de decisão do A* sobre aceitar um caminho recém-descoberto.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, Protocol, TypeVar

from .costs import natural_compare

T = TypeVar("T", bound=Hashable)
P = TypeVar("P")


class MinPriorityQueue(Protocol[T, P]):
    """Contrato mínimo usado pelo A*: offer condicional e poll do menor elemento."""

    def offer(self, element: T, priority: P) -> bool: ...

    def poll(self) -> Optional[T]: ...

    def __len__(self) -> int: ...


class _HeapNode(Generic[T, P]):
    # prev aponta para o pai quando o nó é o filho mais à esquerda; senão, para o irmão à esquerda.
    __slots__ = ("element", "priority", "child", "sibling", "prev")

    def __init__(self, element: T, priority: P):
        self.element = element
        self.priority = priority
        self.child: Optional[_HeapNode[T, P]] = None
        self.sibling: Optional[_HeapNode[T, P]] = None
        self.prev: Optional[_HeapNode[T, P]] = None


class PairingHeap(Generic[T, P]):
    """
    Heap de pareamento com decrease-key.
    compare(a, b) -> int segue a convenção de cmp: negativo se a < b, zero se iguais, positivo se a > b.
    poll em O(log n) amortizado; offer e decrease-key em O(1).
    """

    def __init__(self, compare: Callable[[P, P], int] = natural_compare):
        self._compare = compare
        self._root: Optional[_HeapNode[T, P]] = None
        self._nodes: Dict[T, _HeapNode[T, P]] = {}

    def offer(self, element: T, priority: P) -> bool:
        """
        Insere element com priority, ou reduz sua prioridade se já estiver na fila.
        Retorna True se o elemento foi inserido ou teve a prioridade estritamente reduzida;
        False se já estava presente com prioridade menor ou igual (fila inalterada).
        """
        node = self._nodes.get(element)
        if node is None:
            node = _HeapNode(element, priority)
            self._nodes[element] = node
            self._root = self._meld(self._root, node)
            return True
        if self._compare(priority, node.priority) < 0:
            self._decrease_key(node, priority)
            return True
        return False

    def poll(self) -> Optional[T]:
        """Remove e retorna o elemento de menor prioridade; None se a fila estiver vazia."""
        root = self._root
        if root is None:
            return None
        del self._nodes[root.element]
        self._root = self._merge_pairs(root.child)
        return root.element

    def peek(self) -> Optional[T]:
        """Elemento de menor prioridade sem removê-lo."""
        return None if self._root is None else self._root.element

    def priority_of(self, element: T) -> P:
        """Prioridade atual de element. Levanta KeyError se não estiver na fila."""
        return self._nodes[element].priority

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, element: Any) -> bool:
        return element in self._nodes

    def __repr__(self) -> str:
        return f"PairingHeap(size={len(self._nodes)}, min={self.peek()!r})"

    def _decrease_key(self, node: _HeapNode[T, P], priority: P) -> None:
        node.priority = priority
        if node is self._root:
            return
        self._cut(node)
        self._root = self._meld(self._root, node)

    @staticmethod
    def _cut(node: _HeapNode[T, P]) -> None:
        """Desliga a subárvore de node da lista de filhos do pai."""
        prev = node.prev
        if prev is not None:
            if prev.child is node:
                prev.child = node.sibling
            else:
                prev.sibling = node.sibling
        if node.sibling is not None:
            node.sibling.prev = prev
        node.prev = None
        node.sibling = None

    def _meld(
        self,
        a: Optional[_HeapNode[T, P]],
        b: Optional[_HeapNode[T, P]],
    ) -> Optional[_HeapNode[T, P]]:
        """Une duas raízes; em empate, a permanece raiz."""
        if a is None:
            return b
        if b is None:
            return a
        if self._compare(b.priority, a.priority) < 0:
            a, b = b, a
        b.prev = a
        b.sibling = a.child
        if a.child is not None:
            a.child.prev = b
        a.child = b
        a.prev = None
        a.sibling = None
        return a

    def _merge_pairs(self, first: Optional[_HeapNode[T, P]]) -> Optional[_HeapNode[T, P]]:
        """Two-pass: pareia os filhos da esquerda para a direita e funde da direita para a esquerda."""
        if first is None:
            return None
        roots: List[_HeapNode[T, P]] = []
        node = first
        while node is not None:
            nxt = node.sibling
            node.prev = None
            node.sibling = None
            roots.append(node)
            node = nxt

        paired: List[_HeapNode[T, P]] = []
        for i in range(0, len(roots) - 1, 2):
            paired.append(self._meld(roots[i], roots[i + 1]))
        if len(roots) % 2 == 1:
            paired.append(roots[-1])

        result = paired[-1]
        for tree in reversed(paired[:-1]):
            result = self._meld(tree, result)
        return result
